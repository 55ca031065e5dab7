"""
Configuration file loaders supporting JSON and YAML formats.
"""

from pathlib import Path
from typing import Dict, Any, Union
import orjson
import yaml

from tinypipe.core.results import ConfigurationError


def load_config_file(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from JSON or YAML file.
    
    Args:
        file_path: Path to configuration file
        
    Returns:
        Dictionary containing configuration
        
    Raises:
        ConfigurationError: If the file cannot be parsed or is not a mapping
        FileNotFoundError: If file doesn't exist
    """
    file_path = Path(file_path)
    
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")
    
    suffix = file_path.suffix.lower()
    
    if suffix == '.json':
        data = _load_json_config(file_path)
    elif suffix in ['.yaml', '.yml']:
        data = _load_yaml_config(file_path)
    else:
        raise ConfigurationError(f"Unsupported configuration file format: {suffix}")
    
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration in {file_path} must be a mapping")
    return data


def _load_json_config(file_path: Path) -> Any:
    """Load JSON configuration file using orjson"""
    try:
        with open(file_path, 'rb') as f:
            return orjson.loads(f.read())
    except orjson.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {file_path}: {e}") from e


def _load_yaml_config(file_path: Path) -> Any:
    """Load YAML configuration file"""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e


def save_config_file(config: Dict[str, Any], file_path: Union[str, Path], format: str = 'auto') -> None:
    """
    Save configuration to JSON or YAML file.
    
    Args:
        config: Configuration dictionary to save
        file_path: Path to save configuration to
        format: Format to save as ('json', 'yaml', or 'auto' to detect from extension)
    """
    file_path = Path(file_path)
    
    if format == 'auto':
        format = 'yaml' if file_path.suffix.lower() in ['.yaml', '.yml'] else 'json'
    
    if format == 'yaml':
        with open(file_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(config, f, default_flow_style=False, indent=2, sort_keys=False)
    else:
        # Path is not JSON serializable by orjson
        with open(file_path, 'wb') as f:
            f.write(orjson.dumps(config, option=orjson.OPT_INDENT_2, default=str))
