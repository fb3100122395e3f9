"""
Factory pattern: coffee is created by a factory chosen from a closed set of tags.

The base ``CoffeeFactory`` decides the skeleton (look up the factory, ask it
for a coffee); each subclass decides which coffee it produces.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Type, Union
from utils.logging_config import get_logger
from utils.exceptions import ConfigurationError, UnimplementedCapabilityError

logger = get_logger(__name__)


class CoffeeType(Enum):
    """Valid factory tags."""
    LATTE = "latte"
    ESPRESSO = "espresso"


@dataclass(frozen=True)
class Coffee:
    name: str


@dataclass(frozen=True)
class Latte(Coffee):
    name: str = "latte"


@dataclass(frozen=True)
class Espresso(Coffee):
    name: str = "espresso"


class CoffeeFactory:
    """Base factory; maps each ``CoffeeType`` to the factory that brews it."""

    _registry: Dict[CoffeeType, Type['CoffeeFactory']] = {}

    @classmethod
    def register(cls, coffee_type: CoffeeType, factory: Type['CoffeeFactory']):
        """Register a factory for a coffee type."""
        CoffeeFactory._registry[coffee_type] = factory
        logger.debug(f"Registered {factory.__name__} for {coffee_type.value}")

    @classmethod
    def create_coffee(cls) -> Coffee:
        """Brew this factory's coffee."""
        raise UnimplementedCapabilityError('create_coffee', cls.__name__)

    @classmethod
    def create_coffee_factory(cls, coffee_type: Union[CoffeeType, str]) -> Coffee:
        """Create a coffee through the factory registered for ``coffee_type``."""
        factory = cls.resolve(coffee_type)
        return factory.create_coffee()

    @classmethod
    def resolve(cls, coffee_type: Union[CoffeeType, str]) -> Type['CoffeeFactory']:
        """Look up the factory class for a tag."""
        try:
            tag = CoffeeType(coffee_type)
        except ValueError:
            raise ConfigurationError(
                f"Unknown coffee type: {coffee_type}",
                details={'available_types': [t.value for t in CoffeeType]}
            ) from None

        if tag not in CoffeeFactory._registry:
            raise ConfigurationError(
                f"No factory registered for coffee type: {tag.value}",
                details={'available_types': cls.list_available()}
            )

        return CoffeeFactory._registry[tag]

    @classmethod
    def list_available(cls) -> List[str]:
        """List all registered coffee types."""
        return [t.value for t in CoffeeFactory._registry]


def register_coffee(coffee_type: CoffeeType):
    """Decorator for registering coffee factories."""
    def decorator(cls):
        CoffeeFactory.register(coffee_type, cls)
        return cls
    return decorator


@register_coffee(CoffeeType.LATTE)
class LatteFactory(CoffeeFactory):

    @classmethod
    def create_coffee(cls) -> Coffee:
        return Latte()


@register_coffee(CoffeeType.ESPRESSO)
class EspressoFactory(CoffeeFactory):

    @classmethod
    def create_coffee(cls) -> Coffee:
        return Espresso()
