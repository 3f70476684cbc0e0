from pathlib import Path
from typing import Dict, Union

import yaml
from pydantic import BaseModel


class YamlModel(BaseModel):
    """Base class for models loaded from YAML files"""

    @classmethod
    def read_yaml(
        cls,
        file_path: Union[str, Path],
        encoding: str = "utf-8"
    ) -> Dict:
        """Read yaml file and return a dict

        Raises:
            FileNotFoundError: If the yaml file does not exist
            yaml.YAMLError: If the yaml file is malformed
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"YAML file not found: {file_path}")

        try:
            with open(file_path, "r", encoding=encoding) as file:
                content = yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML file {file_path}: {e}") from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ValueError(f"YAML file {file_path} must contain a mapping, got {type(content).__name__}")
        return content

    @classmethod
    def from_yaml_file(cls, file_path: Union[str, Path]):
        """Read yaml file and return a model instance

        Raises:
            FileNotFoundError: If the yaml file does not exist
            yaml.YAMLError: If the yaml file is malformed
            ValueError: If the yaml content doesn't match the model schema
        """
        yaml_data = cls.read_yaml(file_path)
        try:
            return cls.model_validate(yaml_data)
        except Exception as e:
            raise ValueError(f"Error creating {cls.__name__} from {file_path}: {e}") from e

    def to_yaml_string(self) -> str:
        """Export model instance to a YAML string"""
        return yaml.safe_dump(self.model_dump(mode="json"), default_flow_style=False)
