from dataclasses import dataclass
from typing import Dict

"""Repository metadata needed to fetch a source snapshot."""
@dataclass
class RepositoryInfo:
    owner: str
    repo: str
    default_branch: str
    archive_url: str
    html_url: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.repo,
            "owner": self.owner,
            "defaultBranch": self.default_branch,
            "url": self.html_url,
        }
