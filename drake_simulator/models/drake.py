"""Drake equation parameters and the result projection.

N = R* · f_p · n_e · f_l · f_i · f_c · L

An order-of-magnitude estimate of the number of communicating civilisations
in the galaxy. Nothing here is validated: bounds are carried as display
metadata only, and negative, infinite or NaN inputs flow straight through.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import DRAKE_PARAMETERS


@dataclass
class ParameterSet:
    """The seven Drake-equation inputs."""

    rate: float                          # R*: star formation rate (stars / year)
    fraction_habitable_planets: float    # f_p: fraction of stars with planets
    num_earthlike: float                 # n_e: habitable planets per such star
    fraction_life: float                 # f_l
    fraction_intelligence: float         # f_i
    fraction_communicating: float        # f_c
    lifetime: float                      # L: years a civilisation stays detectable

    def as_tuple(self) -> tuple[float, ...]:
        """Values in canonical equation order."""
        return (
            self.rate,
            self.fraction_habitable_planets,
            self.num_earthlike,
            self.fraction_life,
            self.fraction_intelligence,
            self.fraction_communicating,
            self.lifetime,
        )


@dataclass
class ParameterDescriptor:
    """A labelled parameter row: display name, value and declared bounds."""

    name: str
    value: float
    min: float
    max: float

    @property
    def label(self) -> str:
        return f"{self.name}: {self.value:.2f}"


def drake_equation(
    rate: float,
    fp: float,
    ne: float,
    fl: float,
    fi: float,
    fc: float,
    l: float,
) -> float:
    # Left-to-right order is canonical; reordering can change the last bit.
    return rate * fp * ne * fl * fi * fc * l


def project(params: ParameterSet) -> float:
    """Evaluate the Drake equation for a parameter set."""
    return drake_equation(*params.as_tuple())


def format_result(value: float) -> str:
    return f"{value:.2f}"


def default_descriptors() -> list[ParameterDescriptor]:
    """Label descriptors for the startup parameter table."""
    return [
        ParameterDescriptor(name=name, value=value, min=lo, max=hi)
        for name, value, lo, hi in DRAKE_PARAMETERS
    ]


def default_parameter_set() -> ParameterSet:
    """The initial parameter values, taken from the startup table."""
    return ParameterSet(*(value for _, value, _, _ in DRAKE_PARAMETERS))
