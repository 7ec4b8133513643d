"""Nothing hidden here, the module is only used for namespacing."""


DEFAULT_GOAL = "Get money, get paid"


class Person:
    def __init__(self, name: str | None = None) -> None:
        self.goal = DEFAULT_GOAL
        self.name = name

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(name={self.name})>"

    def speak(self) -> str:
        return "All I do is " + self.goal


def initialize(name: str | None = None) -> Person:
    return Person(name)
