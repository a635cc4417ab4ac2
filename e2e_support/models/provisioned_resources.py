from dataclasses import field
from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class ProvisionedResources:
    stacks: list[str] = field(default_factory=list)
    repositories: list[str] = field(default_factory=list)
