import logging


logger = logging.getLogger(__name__)


class Business:
    """Knows the secret ingredient. Tells it only when the world is ready."""

    def __init__(self) -> None:
        self.__secret_ingredient = "Bacon"

    def __repr__(self) -> str:
        return "<Business>"

    def __culinary(self, ready_for_prime_time: object) -> str:
        if isinstance(ready_for_prime_time, bool) and ready_for_prime_time:
            logger.info("Revealing the secret ingredient")
            return "You add " + self.__secret_ingredient
        return "You add the secret ingredient"

    def culinary(self, ready: object = None) -> str:
        return self.__culinary(ready)
