"""
Design pattern demos: strategy, factory and singleton.
"""
from .strategy import (
    Strategy,
    FlyBehavior,
    QuackBehavior,
    FlyWithWings,
    FlyNoWay,
    Quack,
    MuteQuack,
    Duck
)
from .factory import (
    CoffeeType,
    Coffee,
    Latte,
    Espresso,
    CoffeeFactory,
    LatteFactory,
    EspressoFactory,
    register_coffee
)
from .singleton import (
    Singleton,
    SingletonMeta,
    Connection,
    create_connection,
    Database,
    DEFAULT_DATABASE_URL
)

__all__ = [
    'Strategy',
    'FlyBehavior',
    'QuackBehavior',
    'FlyWithWings',
    'FlyNoWay',
    'Quack',
    'MuteQuack',
    'Duck',
    'CoffeeType',
    'Coffee',
    'Latte',
    'Espresso',
    'CoffeeFactory',
    'LatteFactory',
    'EspressoFactory',
    'register_coffee',
    'Singleton',
    'SingletonMeta',
    'Connection',
    'create_connection',
    'Database',
    'DEFAULT_DATABASE_URL',
]
