# cnhub/git/hub_config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict

HUB_PREFIX = "cn-"
GITHUB_BASE_URL = "https://github.com/"


@dataclass(frozen=True)
class HubConfig:
    """
    Identity of a hub repository.

    Attributes:
        hub_name (str): Repository name, the sanitized name prefixed with 'cn-'.
        hub_repo (str): '<owner>/<hub_name>' slug.
        hub_url (str): GitHub HTTPS URL of the repository.
        hub_dir (str): Local checkout directory under the workspace root.
    """
    hub_name: str
    hub_repo: str
    hub_url: str
    hub_dir: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "hubName": self.hub_name,
            "hubRepo": self.hub_repo,
            "hubUrl": self.hub_url,
            "hubDir": self.hub_dir,
        }


def build_hub_config(sanitized_name: str, owner: str, workspace_root: str) -> HubConfig:
    """
    Derive the hub identity for a sanitized name and owner.

    Inputs are used as given; callers are responsible for sanitizing the name
    and resolving the owner and workspace root.
    """
    hub_name = HUB_PREFIX + sanitized_name
    hub_repo = f"{owner}/{hub_name}"
    return HubConfig(
        hub_name=hub_name,
        hub_repo=hub_repo,
        hub_url=f"{GITHUB_BASE_URL}{hub_repo}",
        hub_dir=_join_dir(workspace_root, hub_name),
    )


def _join_dir(workspace_root: str, hub_name: str) -> str:
    """Join and normalize: '.' segments dropped, '..' resolved, separators collapsed."""
    hub_dir = os.path.normpath(os.path.join(workspace_root, hub_name))
    # POSIX normpath keeps exactly two leading slashes
    if os.sep == "/" and hub_dir.startswith("//"):
        hub_dir = hub_dir[1:]
    return hub_dir
