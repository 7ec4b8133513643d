"""Functionality behind the chef demo."""

import logging

from rich.console import Console

from kitchen.domain.business import Business
from kitchen.domain.chef import (
    DEFAULT_CHEF_NAME,
    Chef,
    ChefModule,
    Dependencies,
)
from kitchen.domain.food import Food


logger = logging.getLogger(__name__)


def build_dependencies() -> Dependencies:
    logger.info("Building chef dependencies")
    return Dependencies(business=Business(), food=Food())


def banner(title: str) -> str:
    return f"\n------------------ {title} --------------"


def breakfast(chef: Chef, world_status: bool | None = None) -> list[str]:
    return [
        "Step 1: Pancakes. " + chef.flip_pancakes(),
        "Step 2: Scrambled Eggs. " + chef.scramble_eggs(),
        "Step 3: And Finally, " + chef.reveal_secret_ingredient(world_status),
    ]


def run(
    console: Console | None = None,
    *,
    name: str | None = DEFAULT_CHEF_NAME,
    world_status: bool | None = None,
    deps: Dependencies | None = None,
    override_goal: bool = True,
) -> Chef:
    console = Console() if console is None else console
    deps = build_dependencies() if deps is None else deps

    mystery_chef = ChefModule(deps, override_goal=override_goal).initialize(name)

    def say(text: object) -> None:
        console.print(text, markup=False, highlight=False, emoji=False)

    say(banner("This mystery chefs name is"))
    say(mystery_chef.name)

    say(banner("This chefs favorite food is"))
    say(mystery_chef.favorite_food)

    say(banner("This chef says "))
    # speak is not defined on Chef.
    say(mystery_chef.speak())

    say(banner("How to make the best breakfast "))
    for step in breakfast(mystery_chef, world_status):
        say(step)

    return mystery_chef
