"""Abstract Factory.

A top-level factory hands out one sub-factory per enemy family; each
sub-factory only builds the variants of its own family.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional, Union

from gof_patterns.domain.exceptions import UnknownVariantError
from gof_patterns.domain.ports import ConsolePort
from gof_patterns.infrastructure.console import get_console
from gof_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Enemy(ABC):
    family: str = ""
    kind: str = ""

    def describe(self) -> str:
        return f"{self.family} {self.kind}"


# === Aliens =====================================================================


class AlienEnemyEnum(Enum):
    SHIP = "ship"
    BOSS = "boss"


class AlienShip(Enemy):
    family = "Alien"
    kind = "Ship"


class AlienBoss(Enemy):
    family = "Alien"
    kind = "Boss"


class AlienEnemyFactory:
    """Builds alien enemies; unknown discriminators become a boss unless strict."""

    def __init__(self, strict: bool = False):
        self._strict = strict

    def create_alien_enemy(self, enemy_type: Any) -> Union[AlienShip, AlienBoss]:
        if enemy_type is AlienEnemyEnum.SHIP:
            return AlienShip()
        if enemy_type is not AlienEnemyEnum.BOSS:
            if self._strict:
                raise UnknownVariantError("alien enemy", enemy_type, list(AlienEnemyEnum))
            logger.warning("Unknown alien enemy type, defaulting to boss", enemy_type=repr(enemy_type))
        return AlienBoss()


# === Zombies ====================================================================


class ZombieEnemyEnum(Enum):
    PAWN = "pawn"
    BOSS = "boss"


class PawnZombie(Enemy):
    family = "Zombie"
    kind = "Pawn"


class ZombieBoss(Enemy):
    family = "Zombie"
    kind = "Boss"


class ZombieEnemyFactory:
    """Builds zombie enemies; unknown discriminators become a boss unless strict."""

    def __init__(self, strict: bool = False):
        self._strict = strict

    def create_zombie_enemy(self, enemy_type: Any) -> Union[PawnZombie, ZombieBoss]:
        if enemy_type is ZombieEnemyEnum.PAWN:
            return PawnZombie()
        if enemy_type is not ZombieEnemyEnum.BOSS:
            if self._strict:
                raise UnknownVariantError("zombie enemy", enemy_type, list(ZombieEnemyEnum))
            logger.warning("Unknown zombie enemy type, defaulting to boss", enemy_type=repr(enemy_type))
        return ZombieBoss()


# === Factory of factories =======================================================


class AbstractEnemyFactory(ABC):
    @abstractmethod
    def create_alien_enemy_factory(self) -> AlienEnemyFactory:
        pass

    @abstractmethod
    def create_zombie_enemy_factory(self) -> ZombieEnemyFactory:
        pass


class ConcreteEnemyFactory(AbstractEnemyFactory):
    def __init__(self, strict: bool = False):
        self._strict = strict

    def create_alien_enemy_factory(self) -> AlienEnemyFactory:
        return AlienEnemyFactory(strict=self._strict)

    def create_zombie_enemy_factory(self) -> ZombieEnemyFactory:
        return ZombieEnemyFactory(strict=self._strict)


def run_demo(console: Optional[ConsolePort] = None, strict: bool = False) -> None:
    console = console or get_console()

    enemy_factory = ConcreteEnemyFactory(strict=strict)

    alien_enemy_factory = enemy_factory.create_alien_enemy_factory()
    alien_ship = alien_enemy_factory.create_alien_enemy(AlienEnemyEnum.SHIP)
    alien_boss = alien_enemy_factory.create_alien_enemy(AlienEnemyEnum.BOSS)

    zombie_enemy_factory = enemy_factory.create_zombie_enemy_factory()
    zombie_pawn = zombie_enemy_factory.create_zombie_enemy(ZombieEnemyEnum.PAWN)
    zombie_boss = zombie_enemy_factory.create_zombie_enemy(ZombieEnemyEnum.BOSS)

    for enemy in (alien_ship, alien_boss, zombie_pawn, zombie_boss):
        console.write_line(f"Created enemy: {enemy.describe()}")
