"""The SGP4/SDP4 orbit propagator."""

from __future__ import annotations

import copy
import math
from datetime import datetime

from orbitprop.constants import TWOPI
from orbitprop.conversions import jday_time
from orbitprop.lunisolar import dpper
from orbitprop.resonance import dspace
from orbitprop.satellite import Satellite
from orbitprop.vectors import Vector3

_X2O3 = 2.0 / 3.0
_TEMP4 = 1.5e-12


class SGP4Error(ValueError):
    """Raised when propagation yields physically meaningless elements."""


class InvalidMeanMotionError(SGP4Error):
    """Mean motion became negative."""

    def __init__(self, value: float) -> None:
        super().__init__(f"mean motion is less than 0: mean motion is {value:f}")
        self.value = value


class InvalidMeanEccentricityError(SGP4Error):
    """Mean eccentricity left the range 0 <= e < 1."""

    def __init__(self, value: float) -> None:
        super().__init__(
            "mean eccentricity is not within range 0 <= e < 1: "
            f"mean eccentricity is {value:f}")
        self.value = value


class InvalidPerturbedEccentricityError(SGP4Error):
    """Perturbed eccentricity left the range 0 <= e < 1."""

    def __init__(self, value: float) -> None:
        super().__init__(
            "perturbed eccentricity is not within range 0 <= e < 1: "
            f"perturbed eccentricity is {value:f}")
        self.value = value


class InvalidSemilatusRectumError(SGP4Error):
    """Semilatus rectum became negative."""

    def __init__(self, value: float) -> None:
        super().__init__(
            f"semilatus rectum is less than 0: semilatus rectum is {value:f}")
        self.value = value


class SatelliteDecayError(SGP4Error):
    """The orbit radius fell below one Earth radius.

    The position and velocity computed at that moment are kept on the error.
    """

    def __init__(self, mrt: float, position: Vector3, velocity: Vector3) -> None:
        super().__init__(f"mrt is less than 1.0 indicating decay: mrt is {mrt:f}")
        self.mrt = mrt
        self.position = position
        self.velocity = velocity


def sgp4(sat: Satellite, tsince: float) -> tuple[Vector3, Vector3]:
    """Position (km) and velocity (km/s) in TEME at ``tsince`` minutes from epoch.

    ``sat`` must have been initialised by ``sgp4init``; its time and a few
    orientation-dependent terms are updated in place.
    """
    grav = sat.gravity_const
    radiusearthkm = grav.radiusearthkm
    xke = grav.xke
    j2 = grav.j2
    j3oj2 = grav.j3oj2
    vkmpersec = radiusearthkm * xke / 60.0

    sat.t = tsince
    t = tsince

    xmdf = sat.mo + sat.mdot * t
    argpdf = sat.argpo + sat.argpdot * t
    nodedf = sat.nodeo + sat.nodedot * t
    argpm = argpdf
    mm = xmdf
    t2 = t * t
    nodem = nodedf + sat.nodecf * t2
    tempa = 1.0 - sat.cc1 * t
    tempe = sat.bstar * sat.cc4 * t
    templ = sat.t2cof * t2

    if sat.isimp != 1:
        delomg = sat.omgcof * t
        delmtemp = 1.0 + sat.eta * math.cos(xmdf)
        delm = sat.xmcof * (delmtemp * delmtemp * delmtemp - sat.delmo)
        temp = delomg + delm
        mm = xmdf + temp
        argpm = argpdf - temp
        t3 = t2 * t
        t4 = t3 * t
        tempa = tempa - sat.d2 * t2 - sat.d3 * t3 - sat.d4 * t4
        tempe = tempe + sat.bstar * sat.cc5 * (math.sin(mm) - sat.sinmao)
        templ = templ + sat.t3cof * t3 + t4 * (sat.t4cof + t * sat.t5cof)

    nm = sat.no
    em = sat.ecco
    inclm = sat.inclo

    if sat.method == "d":
        deep = dspace(sat, t, t, em, argpm, inclm, mm, nodem, nm)
        em = deep.em
        argpm = deep.argpm
        inclm = deep.inclm
        mm = deep.mm
        nodem = deep.nodem
        nm = deep.nm

    if nm < 0.0:
        raise InvalidMeanMotionError(nm)

    am = math.pow(xke / nm, _X2O3) * tempa * tempa
    nm = xke / math.pow(am, 1.5)
    em = em - tempe

    if em >= 1.0 or em < -0.001:
        raise InvalidMeanEccentricityError(em)
    if em < 1.0e-6:
        em = 1.0e-6

    mm = mm + sat.no * templ
    xlm = mm + argpm + nodem

    nodem = math.fmod(nodem, TWOPI)
    argpm = math.fmod(argpm, TWOPI)
    xlm = math.fmod(xlm, TWOPI)
    mm = math.fmod(xlm - argpm - nodem, TWOPI)

    sinim = math.sin(inclm)
    cosim = math.cos(inclm)

    ep = em
    xincp = inclm
    argpp = argpm
    nodep = nodem
    mp = mm
    sinip = sinim
    cosip = cosim

    if sat.method == "d":
        periodic = dpper(sat, "n", ep, xincp, nodep, argpp, mp, sat.operationmode)
        ep = periodic.ep
        xincp = periodic.inclp
        nodep = periodic.nodep
        argpp = periodic.argpp
        mp = periodic.mp

        if xincp < 0.0:
            xincp = -xincp
            nodep += math.pi
            argpp -= math.pi

        if ep < 0.0 or ep > 1.0:
            raise InvalidPerturbedEccentricityError(ep)

        sinip = math.sin(xincp)
        cosip = math.cos(xincp)
        sat.aycof = -0.5 * j3oj2 * sinip
        denominator = 1.0 + cosip if abs(cosip + 1.0) > 1.5e-12 else _TEMP4
        sat.xlcof = -0.25 * j3oj2 * sinip * (3.0 + 5.0 * cosip) / denominator

    axnl = ep * math.cos(argpp)
    temp = 1.0 / (am * (1.0 - ep * ep))
    aynl = ep * math.sin(argpp) + temp * sat.aycof
    xl = mp + argpp + nodep + temp * sat.xlcof * axnl

    # Solve Kepler's equation.
    u = math.fmod(xl - nodep, TWOPI)
    eo1 = u
    tem5 = 9999.9
    sineo1 = coseo1 = 0.0
    for _ in range(10):
        if abs(tem5) < 1.0e-12:
            break
        sineo1 = math.sin(eo1)
        coseo1 = math.cos(eo1)
        tem5 = 1.0 - coseo1 * axnl - sineo1 * aynl
        tem5 = (u - aynl * coseo1 + axnl * sineo1 - eo1) / tem5
        if abs(tem5) >= 0.95:
            tem5 = 0.95 if tem5 > 0.0 else -0.95
        eo1 += tem5

    ecose = axnl * coseo1 + aynl * sineo1
    esine = axnl * sineo1 - aynl * coseo1
    el2 = axnl * axnl + aynl * aynl
    pl = am * (1.0 - el2)

    if pl < 0.0:
        raise InvalidSemilatusRectumError(pl)

    rl = am * (1.0 - ecose)
    rdotl = math.sqrt(am) * esine / rl
    rvdotl = math.sqrt(pl) / rl
    betal = math.sqrt(1.0 - el2)
    temp = esine / (1.0 + betal)
    sinu = am / rl * (sineo1 - aynl - axnl * temp)
    cosu = am / rl * (coseo1 - axnl + aynl * temp)
    su = math.atan2(sinu, cosu)
    sin2u = (cosu + cosu) * sinu
    cos2u = 1.0 - 2.0 * sinu * sinu
    temp = 1.0 / pl
    temp1 = 0.5 * j2 * temp
    temp2 = temp1 * temp

    if sat.method == "d":
        cosisq = cosip * cosip
        sat.con41 = 3.0 * cosisq - 1.0
        sat.x1mth2 = 1.0 - cosisq
        sat.x7thm1 = 7.0 * cosisq - 1.0

    mrt = (rl * (1.0 - 1.5 * temp2 * betal * sat.con41)
           + 0.5 * temp1 * sat.x1mth2 * cos2u)
    su -= 0.25 * temp2 * sat.x7thm1 * sin2u
    xnode = nodep + 1.5 * temp2 * cosip * sin2u
    xinc = xincp + 1.5 * temp2 * cosip * sinip * cos2u
    mvt = rdotl - nm * temp1 * sat.x1mth2 * sin2u / xke
    rvdot = rvdotl + nm * temp1 * (sat.x1mth2 * cos2u + 1.5 * sat.con41) / xke

    sinsu = math.sin(su)
    cossu = math.cos(su)
    snod = math.sin(xnode)
    cnod = math.cos(xnode)
    sini = math.sin(xinc)
    cosi = math.cos(xinc)
    xmx = -snod * cosi
    xmy = cnod * cosi
    ux = xmx * sinsu + cnod * cossu
    uy = xmy * sinsu + snod * cossu
    uz = sini * sinsu
    vx = xmx * cossu - cnod * sinsu
    vy = xmy * cossu - snod * sinsu
    vz = sini * cossu

    mr = mrt * radiusearthkm
    position = Vector3(mr * ux, mr * uy, mr * uz)
    velocity = Vector3(
        (mvt * ux + rvdot * vx) * vkmpersec,
        (mvt * uy + rvdot * vy) * vkmpersec,
        (mvt * uz + rvdot * vz) * vkmpersec,
    )

    if mrt < 1.0:
        raise SatelliteDecayError(mrt, position, velocity)

    return position, velocity


def propagate(sat: Satellite, date: datetime) -> tuple[Vector3, Vector3]:
    """Position and velocity at ``date``; ``sat`` itself is left untouched."""
    time_since = (jday_time(date) - sat.jdsatepoch) * 1440
    return sgp4(copy.copy(sat), time_since)