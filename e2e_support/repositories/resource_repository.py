from dataclasses import asdict, replace
import os
from pathlib import Path

from ruamel.yaml import YAML
from e2e_support.models import ProvisionedResources
from e2e_support.utils.yaml_loader import get_yaml_instance


class ResourceRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> ProvisionedResources:
        if not os.path.isfile(path=Path(self.file_path)):
            return ProvisionedResources()
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f)
        if data is None:
            return ProvisionedResources()
        try:
            return ProvisionedResources(**data)
        except Exception as e:
            raise ValueError(f"Invalid resources manifest: {e}") from e

    def add_stack(self, name: str) -> bool:
        resources = self.find_all()
        if name in resources.stacks:
            return True
        return self._write(replace(resources, stacks=[*resources.stacks, name]))

    def add_repository(self, name: str) -> bool:
        resources = self.find_all()
        if name in resources.repositories:
            return True
        return self._write(replace(resources, repositories=[*resources.repositories, name]))

    def remove_stack(self, name: str) -> bool:
        resources = self.find_all()
        return self._write(replace(resources, stacks=[s for s in resources.stacks if s != name]))

    def remove_repository(self, name: str) -> bool:
        resources = self.find_all()
        return self._write(replace(resources, repositories=[r for r in resources.repositories if r != name]))

    def clear(self) -> bool:
        return self._write(ProvisionedResources())

    def _write(self, resources: ProvisionedResources) -> bool:
        try:
            with open(self.file_path, "w") as f:
                self.yaml.dump(asdict(resources), f)
            return True
        except Exception as e:
            raise Exception(f"Error writing resources manifest: {e}") from e
