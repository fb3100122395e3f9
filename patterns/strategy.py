"""
Strategy pattern: a duck whose flying and quacking are delegated to
interchangeable behavior objects.

A ``Duck`` never changes its own code to behave differently. Its behavior
changes when a different strategy is placed into one of its slots, either at
construction or later through the ``fly_behavior`` / ``quack_behavior``
properties.
"""
from abc import ABC, abstractmethod
from typing import Any
from utils.logging_config import get_logger
from utils.exceptions import UnimplementedCapabilityError

logger = get_logger(__name__)


class Strategy(ABC):
    """Abstract strategy base class."""

    __slots__ = ()

    @abstractmethod
    def execute(self) -> Any:
        """Execute the strategy."""
        pass


class FlyBehavior(Strategy):
    """Locomotion strategies. Concrete variants must override ``fly``."""

    __slots__ = ()

    def fly(self) -> None:
        raise UnimplementedCapabilityError('fly', self.__class__.__name__)

    def execute(self) -> None:
        self.fly()


class QuackBehavior(Strategy):
    """Vocalization strategies. Concrete variants must override ``quack``."""

    __slots__ = ()

    def quack(self) -> None:
        raise UnimplementedCapabilityError('quack', self.__class__.__name__)

    def execute(self) -> None:
        self.quack()


class FlyWithWings(FlyBehavior):
    """Flies with its wings."""

    __slots__ = ()
    message = "I fly with wings!"

    def fly(self) -> None:
        print(self.message)


class FlyNoWay(FlyBehavior):
    """Cannot fly at all."""

    __slots__ = ()
    message = "I can't fly."

    def fly(self) -> None:
        print(self.message)


class Quack(QuackBehavior):
    __slots__ = ()
    message = "Quack!"

    def quack(self) -> None:
        print(self.message)


class MuteQuack(QuackBehavior):
    __slots__ = ()
    message = "....."

    def quack(self) -> None:
        print(self.message)


class Duck:
    """
    Context holding one fly strategy and one quack strategy.

    Strategies are shared, not owned: the same instance may sit in the slots of
    any number of ducks. Slots are not type-checked; any object with a ``fly``
    (or ``quack``) method is accepted.
    """

    def __init__(self, fly_behavior: FlyBehavior, quack_behavior: QuackBehavior):
        self._fly_behavior = fly_behavior
        self._quack_behavior = quack_behavior
        self.logger = get_logger(self.__class__.__name__)

    @property
    def fly_behavior(self) -> FlyBehavior:
        """Get current fly strategy."""
        return self._fly_behavior

    @fly_behavior.setter
    def fly_behavior(self, behavior: FlyBehavior):
        """Set new fly strategy."""
        self.logger.info(f"Switching fly behavior to {behavior.__class__.__name__}")
        self._fly_behavior = behavior

    @property
    def quack_behavior(self) -> QuackBehavior:
        """Get current quack strategy."""
        return self._quack_behavior

    @quack_behavior.setter
    def quack_behavior(self, behavior: QuackBehavior):
        """Set new quack strategy."""
        self.logger.info(f"Switching quack behavior to {behavior.__class__.__name__}")
        self._quack_behavior = behavior

    def perform_fly(self) -> None:
        self._fly_behavior.fly()

    def perform_quack(self) -> None:
        self._quack_behavior.quack()

    def display(self) -> None:
        print("A duck appears!!")

    def hide(self) -> None:
        print("The duck leaves..")

    def swim(self) -> None:
        print("Swimming.")

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"fly_behavior={self._fly_behavior.__class__.__name__}, "
            f"quack_behavior={self._quack_behavior.__class__.__name__})"
        )
