"""
Configuration management for the elbow router with Pydantic validation
"""

from typing import Dict, List, Union, Optional, Any, Literal
from pathlib import Path
import math
import os
import re
import yaml
from pydantic import BaseModel, Field, field_validator, ConfigDict

from .exceptions import ConfigurationError
from ..routing.grid import CELL_SIZE
from ..routing.router import ElbowRouter


# ============================================================================
# Pydantic Models for Configuration Validation
# ============================================================================

class GridConfig(BaseModel):
    """Routing grid configuration"""
    cell_size: float = Field(CELL_SIZE, gt=0, description="Grid cell size in canvas units")

    @field_validator('cell_size')
    @classmethod
    def validate_finite(cls, v):
        """Reject infinite cell sizes"""
        if not math.isfinite(v):
            raise ValueError("cell_size must be finite")
        return v


class SearchConfig(BaseModel):
    """Search limits (unbounded when unset)"""
    max_grid_distance: Optional[int] = Field(None, gt=0, description="Maximum Manhattan distance in grid cells to search")
    max_expansions: Optional[int] = Field(None, gt=0, description="Maximum number of search states to expand")


class RenderConfig(BaseModel):
    """SVG rendering configuration"""
    corner_radius: float = Field(0.0, ge=0, description="Corner rounding radius (0 = sharp corners)")
    stroke_width: float = Field(2.0, gt=0, description="Connector stroke width")
    stroke_color: str = Field('#1e1e1e', min_length=1, description="Connector stroke color")
    padding: float = Field(20.0, ge=0, description="Padding around the drawing")


class OutputConfig(BaseModel):
    """Output configuration"""
    directory: str = Field('routing_results', description="Output directory path")
    formats: List[Literal['json', 'csv', 'parquet', 'svg']] = Field(
        default_factory=lambda: ['json', 'csv'],
        min_length=1,
        description="Export formats"
    )
    file_prefix: str = Field('routes', min_length=1, description="File prefix for outputs")


class RouterConfigModel(BaseModel):
    """Pydantic model for router configuration validation"""
    model_config = ConfigDict(extra='ignore')  # Ignore extra fields in YAML

    # Metadata (optional)
    version: Optional[Union[int, float, str]] = None
    project: Optional[str] = None
    description: Optional[str] = None

    grid: GridConfig = Field(default_factory=GridConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


# ============================================================================
# Environment Variable Substitution
# ============================================================================

def _substitute_env_vars(value: Any) -> Any:
    """
    Recursively substitute environment variables in configuration values

    Supports multiple formats:
    - ${VAR_NAME}
    - $VAR_NAME
    - ${VAR_NAME:-default_value}  (with default)

    Args:
        value: Configuration value (can be str, dict, list, or other)

    Returns:
        Value with environment variables substituted
    """
    if isinstance(value, str):
        def replace_with_default(match):
            var_name = match.group(1)
            default_value = match.group(3)
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            elif default_value is not None:
                return default_value
            else:
                raise ValueError(f"Environment variable '{var_name}' is not set and no default value provided")

        value = re.sub(r'\$\{([A-Za-z_][A-Za-z0-9_]*)(:-([^}]*))?\}', replace_with_default, value)

        def replace_simple(match):
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is not None:
                return env_value
            else:
                raise ValueError(f"Environment variable '{var_name}' is not set")

        value = re.sub(r'\$([A-Za-z_][A-Za-z0-9_]*)', replace_simple, value)

        return value

    elif isinstance(value, dict):
        return {k: _substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [_substitute_env_vars(item) for item in value]

    else:
        return value


# ============================================================================
# RouterConfig Class (wrapper around Pydantic model)
# ============================================================================

class RouterConfig:
    """Configuration class for routing parameters with validation"""

    def __init__(self, config_dict: Optional[Dict] = None):
        """Initialize from dictionary (parsed from YAML) with Pydantic validation"""
        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ConfigurationError(f"Configuration must be a mapping, got: {type(config_dict).__name__}")

        try:
            config_dict = _substitute_env_vars(config_dict)
            self._model = RouterConfigModel(**config_dict)
        except ValueError as e:
            raise ConfigurationError(f"Configuration validation failed: {str(e)}") from e

        # Metadata
        self.config_version = self._model.version
        self.config_project = self._model.project
        self.config_description = self._model.description

        # Grid and search
        self.cell_size = self._model.grid.cell_size
        self.max_grid_distance = self._model.search.max_grid_distance
        self.max_expansions = self._model.search.max_expansions

        # Rendering
        self.corner_radius = self._model.render.corner_radius
        self.stroke_width = self._model.render.stroke_width
        self.stroke_color = self._model.render.stroke_color
        self.padding = self._model.render.padding

        # Output
        self.output_dir = Path(self._model.output.directory)
        self.export_formats = self._model.output.formats
        self.file_prefix = self._model.output.file_prefix

    def build_router(self) -> ElbowRouter:
        """Create a router using this configuration"""
        return ElbowRouter(
            cell_size=self.cell_size,
            max_grid_distance=self.max_grid_distance,
            max_expansions=self.max_expansions
        )

    @classmethod
    def default(cls) -> 'RouterConfig':
        """Configuration with every setting at its default"""
        return cls({})

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> 'RouterConfig':
        """Load configuration from YAML file with validation"""
        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML file: {str(e)}") from e
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        # Empty file means defaults
        return cls(config_dict or {})

    def to_dict(self) -> Dict:
        """Convert config back to dictionary"""
        return {
            'grid': {
                'cell_size': self.cell_size
            },
            'search': {
                'max_grid_distance': self.max_grid_distance,
                'max_expansions': self.max_expansions
            },
            'render': {
                'corner_radius': self.corner_radius,
                'stroke_width': self.stroke_width,
                'stroke_color': self.stroke_color,
                'padding': self.padding
            },
            'output': {
                'directory': str(self.output_dir),
                'formats': list(self.export_formats),
                'file_prefix': self.file_prefix
            }
        }
