from typing import List, Sequence


class GradientBuildError(ValueError):
    """Base class for every reason ``GradientBuilder.build`` can refuse its input."""


class InvalidColorError(GradientBuildError):
    """One or more color strings could not be parsed; all of them are listed."""

    def __init__(self, colors: Sequence[str]):
        self.colors: List[str] = list(colors)
        super().__init__("invalid html colors: " + ", ".join(f"'{c}'" for c in self.colors))


class WrongDomainCountError(GradientBuildError):
    """Position count is neither 0, 2 nor the number of colors."""

    def __init__(self, message: str = "wrong domain count"):
        super().__init__(message)


class WrongDomainError(GradientBuildError):
    """Positions decrease somewhere, or a two-value domain has min >= max."""

    def __init__(self, message: str = "wrong domain"):
        super().__init__(message)
