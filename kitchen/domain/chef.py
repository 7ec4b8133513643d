"""The chef. A `Person` who cooks and keeps a secret.

Collaborators come in through `Dependencies`; swapping one out means
handing over a different object, nothing in here changes.
"""

import logging

from kitchen.domain.business import Business
from kitchen.domain.food import Food
from kitchen.domain.people import Person


logger = logging.getLogger(__name__)


DEFAULT_CHEF_NAME = "Gordon ******"
CHEF_GOAL = "Make awesome food"
WORLD_DEFAULT_STATUS = False


class Dependencies:
    def __init__(self, *, business: Business, food: Food) -> None:
        self.business = business
        self.food = food


class Chef(Person):
    def __init__(
        self,
        name: str | None,
        *,
        business: Business,
        food: Food,
        override_goal: bool = True,
    ) -> None:
        super().__init__(name)
        if override_goal:
            self.goal = CHEF_GOAL
        self.favorite_food = food.randomize()
        self._business = business

    def flip_pancakes(self) -> str:
        return "It's all in the flick of the wrist"

    def scramble_eggs(self) -> str:
        return "Small circles gets you the best results"

    def reveal_secret_ingredient(self, world_status: bool | None = None) -> str:
        the_world_is_ready = (
            WORLD_DEFAULT_STATUS if world_status is None else world_status
        )
        return self._business.culinary(the_world_is_ready)


class ChefModule:
    def __init__(self, deps: Dependencies, *, override_goal: bool = True) -> None:
        self._food = deps.food
        self._business = deps.business
        self._override_goal = override_goal

    def initialize(self, name: str | None = None) -> Chef:
        chef = Chef(
            name,
            business=self._business,
            food=self._food,
            override_goal=self._override_goal,
        )
        logger.debug("Created %r with goal %r", chef, chef.goal)
        return chef
