"""
Configuration schema for SpatialContext.

Defines how a context is described in YAML: surface kind, distance
calculator and (for cartesian contexts) world bounds.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from geosect.context import SpatialContext
from geosect.distance import (
    CartesianDistCalc,
    HaversineDistCalc,
    LawOfCosinesDistCalc,
    VincentyDistCalc,
)
from geosect.logging import LogEvent, StructuredLogger, create_logger
from geosect.shapes import Rectangle

DISTANCE_CALCULATORS = {
    "cartesian": CartesianDistCalc,
    "haversine": HaversineDistCalc,
    "law_of_cosines": LawOfCosinesDistCalc,
    "vincenty": VincentyDistCalc,
}

GEODESIC_CALCULATORS = {"haversine", "law_of_cosines", "vincenty"}


@dataclass(frozen=True)
class WorldBoundsConfig:
    """World bounds for a cartesian context."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self):
        """Validate bounds ordering."""
        if self.min_x > self.max_x:
            raise ValueError(
                f"world_bounds min_x must be <= max_x, got {self.min_x} > {self.max_x}"
            )
        if self.min_y > self.max_y:
            raise ValueError(
                f"world_bounds min_y must be <= max_y, got {self.min_y} > {self.max_y}"
            )

    def to_rectangle(self) -> Rectangle:
        return Rectangle(self.min_x, self.max_x, self.min_y, self.max_y)


@dataclass(frozen=True)
class SpatialContextConfig:
    """
    Main configuration for a SpatialContext.

    Loaded from YAML and validated at startup.
    Immutable after construction (frozen dataclass).
    """

    geo: bool = True
    distance_calculator: Optional[str] = None  # default: haversine / cartesian
    world_bounds: Optional[WorldBoundsConfig] = None

    def __post_init__(self):
        """Validate context configuration."""
        if not isinstance(self.geo, bool):
            raise ValueError(f"geo must be true or false, got {self.geo!r}")

        if self.distance_calculator is not None:
            if self.distance_calculator not in DISTANCE_CALCULATORS:
                raise ValueError(
                    f"Invalid distance_calculator: {self.distance_calculator}. "
                    f"Must be one of {sorted(DISTANCE_CALCULATORS)}"
                )

            is_geodesic = self.distance_calculator in GEODESIC_CALCULATORS
            if self.geo and not is_geodesic:
                raise ValueError(
                    f"Geo contexts need a geodesic calculator, got '{self.distance_calculator}'"
                )
            if not self.geo and is_geodesic:
                raise ValueError(
                    f"Cartesian contexts need the 'cartesian' calculator, "
                    f"got '{self.distance_calculator}'"
                )

        if self.geo and self.world_bounds is not None:
            raise ValueError("world_bounds can only be set for cartesian contexts")

    @property
    def calculator_name(self) -> str:
        if self.distance_calculator is not None:
            return self.distance_calculator
        return "haversine" if self.geo else "cartesian"

    def build_context(self, logger: Optional[StructuredLogger] = None) -> SpatialContext:
        """
        Create the SpatialContext this configuration describes.

        Args:
            logger: Structured logger handed to the context

        Returns:
            New SpatialContext
        """
        calculator = DISTANCE_CALCULATORS[self.calculator_name]()
        world_bounds = self.world_bounds.to_rectangle() if self.world_bounds else None
        return SpatialContext(
            geo=self.geo,
            distance_calculator=calculator,
            world_bounds=world_bounds,
            logger=logger,
        )

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SpatialContextConfig":
        """
        Build configuration from a plain dict (e.g. parsed YAML).

        Raises:
            ValueError: If a key is unknown or a value invalid
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")
        unknown = set(data) - {"geo", "distance_calculator", "world_bounds"}
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")

        world_bounds_data = data.get("world_bounds")
        world_bounds = None
        if world_bounds_data is not None:
            try:
                world_bounds = WorldBoundsConfig(
                    min_x=float(world_bounds_data["min_x"]),
                    max_x=float(world_bounds_data["max_x"]),
                    min_y=float(world_bounds_data["min_y"]),
                    max_y=float(world_bounds_data["max_y"]),
                )
            except KeyError as e:
                raise ValueError(f"Missing required world_bounds field: {e}")

        return cls(
            geo=data.get("geo", True),
            distance_calculator=data.get("distance_calculator"),
            world_bounds=world_bounds,
        )

    @classmethod
    def from_yaml(
        cls,
        yaml_path: Path,
        logger: Optional[StructuredLogger] = None
    ) -> "SpatialContextConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            geo: false
            distance_calculator: "cartesian"
            world_bounds:
              min_x: 0
              max_x: 1000
              min_y: 0
              max_y: 1000

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML or its values are invalid
        """
        logger = logger or create_logger("config")
        path = Path(yaml_path)

        if not path.exists():
            error = FileNotFoundError(f"Config file not found: {path}")
            logger.error(
                event=LogEvent.CONFIG_ERROR,
                message="Config file not found",
                metadata={'path': str(path)},
                exc_info=error
            )
            raise error

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            config = cls.from_dict(data)
        except yaml.YAMLError as e:
            logger.error(
                event=LogEvent.CONFIG_ERROR,
                message="Invalid YAML",
                metadata={'path': str(path)},
                exc_info=e
            )
            raise ValueError(f"Invalid YAML in {path}: {e}")
        except ValueError as e:
            logger.error(
                event=LogEvent.CONFIG_ERROR,
                message="Invalid context config",
                metadata={'path': str(path)},
                exc_info=e
            )
            raise

        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Loaded spatial context config",
            metadata={
                'path': str(path),
                'geo': config.geo,
                'distance_calculator': config.calculator_name,
            }
        )
        return config
