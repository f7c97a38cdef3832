# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass

from .angles import arcsec_to_deg, wrap_rad


@dataclass(frozen=True)
class SolarMean:
    """Mean elements of the Sun (radians, wrapped to [0, 2pi))."""
    L0_rad: float  # geometric mean longitude
    M_rad: float   # mean anomaly

    @property
    def L0_deg(self) -> float: return math.degrees(self.L0_rad)
    @property
    def M_deg(self) -> float: return math.degrees(self.M_rad)


@dataclass(frozen=True)
class SolarEquatorial:
    """Apparent-enough equatorial coordinates of the Sun for horizon work."""
    right_ascension_rad: float  # [0, 2pi)
    declination_rad: float
    true_longitude_rad: float
    obliquity_rad: float
    eccentricity: float

    @property
    def right_ascension_deg(self) -> float: return math.degrees(self.right_ascension_rad)
    @property
    def declination_deg(self) -> float: return math.degrees(self.declination_rad)


def solar_mean_elements(T: float) -> SolarMean:
    """
    Meeus-style geometric mean longitude L0 and mean anomaly M.
      L0 = 280.46646 + 36000.76983 T + 0.0003032 T^2
      M  = 357.52911 + 35999.05029 T - 0.0001537 T^2
    """
    L0 = 280.46646 + T * (36000.76983 + T * 0.0003032)
    M = 357.52911 + T * (35999.05029 - T * 0.0001537)
    return SolarMean(
        L0_rad=wrap_rad(math.radians(L0)),
        M_rad=wrap_rad(math.radians(M)),
    )


def eccentricity_earth_orbit(T: float) -> float:
    """Eccentricity of the Earth's orbit (dimensionless)."""
    return 0.016708634 - T * (0.000042037 + T * 0.0000001267)


def equation_of_center_deg(M_rad: float, T: float) -> float:
    """Equation of center C (degrees) from the mean anomaly (radians)."""
    return (
        math.sin(M_rad) * (1.914602 - T * (0.004817 + 0.000014 * T))
        + math.sin(2.0 * M_rad) * (0.019993 - 0.000101 * T)
        + math.sin(3.0 * M_rad) * 0.000289
    )


def obliquity_correction_deg(T: float) -> float:
    """
    Obliquity of the ecliptic (IAU 1980 cubic):
      eps = 23°26'21.448" - 46.8150"T - 0.00059"T^2 + 0.001813"T^3
    """
    eps0 = 23.0 + 26.0 / 60.0 + 21.448 / 3600.0
    return eps0 - T * (arcsec_to_deg(46.8150) + T * (arcsec_to_deg(0.00059) - T * arcsec_to_deg(0.001813)))


def solar_equatorial(T: float) -> SolarEquatorial:
    """
    Right ascension and declination of the Sun for Julian century T.
    Low precision (~0.01 deg), adequate for horizon coordinates.
    """
    sm = solar_mean_elements(T)
    C_deg = equation_of_center_deg(sm.M_rad, T)
    lam = sm.L0_rad + math.radians(C_deg)
    eps = math.radians(obliquity_correction_deg(T))

    # atan2 keeps the quadrant of lambda
    alpha = wrap_rad(math.atan2(math.cos(eps) * math.sin(lam), math.cos(lam)))
    delta = math.asin(math.sin(eps) * math.sin(lam))

    return SolarEquatorial(
        right_ascension_rad=alpha,
        declination_rad=delta,
        true_longitude_rad=lam,
        obliquity_rad=eps,
        eccentricity=eccentricity_earth_orbit(T),
    )
