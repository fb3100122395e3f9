"""
Runnable demonstrations of the strategy, factory and singleton patterns.

Run with ``pattern-demos`` or ``python -m patterns.demos``. Demo output goes to
stdout; logging goes to stderr.
"""
from typing import Callable, Dict
from config import get_config_manager
from utils.logging_config import get_logger, LoggerFactory, LogContext
from utils.error_handlers import ErrorContext
from utils.exceptions import ConfigurationError
from .strategy import Duck, FlyWithWings, FlyNoWay, Quack, MuteQuack
from .factory import CoffeeFactory, CoffeeType
from .singleton import Database, DEFAULT_DATABASE_URL

logger = get_logger(__name__)


def run_strategy_demo():
    """Two ducks built from different strategies, then one swapped at runtime."""
    mallard = Duck(FlyWithWings(), Quack())
    rubber_duck = Duck(FlyNoWay(), MuteQuack())

    for duck in (mallard, rubber_duck):
        duck.display()
        duck.perform_fly()
        duck.perform_quack()
        duck.swim()
        duck.hide()

    # Same Duck class, new behavior
    mallard.fly_behavior = FlyNoWay()
    mallard.perform_fly()


def run_factory_demo():
    coffee = CoffeeFactory.create_coffee_factory(CoffeeType.ESPRESSO.value)
    print(coffee.name)


def run_singleton_demo():
    url = get_config_manager().get('database.url', DEFAULT_DATABASE_URL)
    a = Database(url)
    b = Database(url)
    print(f"Same instance: {a is b}")
    print(f"Connected to {a.connect().url}")


DEMOS: Dict[str, Callable[[], None]] = {
    'strategy': run_strategy_demo,
    'factory': run_factory_demo,
    'singleton': run_singleton_demo,
}


def configure_logging():
    """Install logging handlers from the ``logging`` config section."""
    settings = get_config_manager().get('logging', {})
    LoggerFactory.configure(
        log_dir=settings.get('log_dir', 'logs'),
        log_level=settings.get('log_level', 'WARNING'),
        enable_console=settings.get('enable_console', True),
        enable_file=settings.get('enable_file', False),
        enable_structured=settings.get('enable_structured', False)
    )


def main() -> int:
    configure_logging()

    enabled = get_config_manager().get('demos.enabled', list(DEMOS))
    unknown = [name for name in enabled if name not in DEMOS]
    if unknown:
        raise ConfigurationError(
            f"Unknown demos: {', '.join(unknown)}",
            details={'available_demos': list(DEMOS)}
        )

    for name in enabled:
        with LogContext(logger, demo=name), ErrorContext(f"{name} demo"):
            print(f"== {name} pattern ==")
            DEMOS[name]()

    logger.info(f"Ran {len(enabled)} demos")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
