"""Initialisation of the propagator from an element set."""

from __future__ import annotations

import math
from dataclasses import dataclass

from orbitprop.constants import DEG2RAD, TWOPI, XPDOTP
from orbitprop.conversions import days2mdhms, gstime, jday
from orbitprop.gravity import GravConst, Gravity, get_grav_const
from orbitprop.lunisolar import dpper, dscom
from orbitprop.propagator import sgp4
from orbitprop.resonance import dsinit
from orbitprop.satellite import Satellite
from orbitprop.tle import parse_tle
from orbitprop.vectors import Vector3

_X2O3 = 2.0 / 3.0
_TEMP4 = 1.5e-12

_LUNISOLAR_FIELDS = (
    "e3", "ee2", "peo", "pgho", "pho", "pinco", "plo",
    "se2", "se3", "sgh2", "sgh3", "sgh4", "sh2", "sh3",
    "si2", "si3", "sl2", "sl3", "sl4",
    "xgh2", "xgh3", "xgh4", "xh2", "xh3", "xi2", "xi3",
    "xl2", "xl3", "xl4", "zmol", "zmos",
)

_RESONANCE_FIELDS = (
    "irez", "atime",
    "d2201", "d2211", "d3210", "d3222", "d4410",
    "d4422", "d5220", "d5232", "d5421", "d5433",
    "dedt", "didt", "dmdt", "dnodt", "domdt",
    "del1", "del2", "del3", "xfact", "xlamo", "xli", "xni",
)


@dataclass(frozen=True)
class InitlResult:
    """Quantities derived from the mean elements at epoch."""

    ainv: float
    no: float
    ao: float
    con41: float
    con42: float
    cosio: float
    cosio2: float
    eccsq: float
    omeosq: float
    posq: float
    rp: float
    rteosq: float
    sinio: float
    gsto: float


def initl(grav: GravConst, ecco: float, epoch: float, inclo: float,
          no_in: float, opsmode: str) -> InitlResult:
    """Recover the original mean motion and derive the epoch quantities.

    ``epoch`` is in days since 1950 January 0.0. With ``opsmode`` "a" the
    sidereal time uses the AFSPC formula, otherwise IAU-82.
    """
    eccsq = ecco * ecco
    omeosq = 1.0 - eccsq
    rteosq = math.sqrt(omeosq)
    cosio = math.cos(inclo)
    cosio2 = cosio * cosio

    ak = math.pow(grav.xke / no_in, _X2O3)
    d1 = 0.75 * grav.j2 * (3.0 * cosio2 - 1.0) / (rteosq * omeosq)
    del_ = d1 / (ak * ak)
    adel = ak * (1.0 - del_ * del_ - del_ * (1.0 / 3.0 + 134.0 * del_ * del_ / 81.0))
    del_ = d1 / (adel * adel)
    no = no_in / (1.0 + del_)

    ao = math.pow(grav.xke / no, _X2O3)
    sinio = math.sin(inclo)
    po = ao * omeosq
    con42 = 1.0 - 5.0 * cosio2
    con41 = -con42 - cosio2 - cosio2

    if opsmode == "a":
        ts70 = epoch - 7305.0
        ds70 = math.floor(ts70 - 1.0e-8)
        tfrac = ts70 - ds70
        c1 = 1.72027916940703639e-2
        thgr70 = 1.7321343856509374
        fk5r = 5.07551419432269442e-15
        c1p2p = c1 + TWOPI
        gsto = math.fmod(thgr70 + c1 * ds70 + c1p2p * tfrac + ts70 * ts70 * fk5r,
                         TWOPI)
        if gsto < 0.0:
            gsto += TWOPI
    else:
        gsto = gstime(epoch + 2433281.5)

    return InitlResult(
        ainv=1.0 / ao, no=no, ao=ao, con41=con41, con42=con42,
        cosio=cosio, cosio2=cosio2, eccsq=eccsq, omeosq=omeosq,
        posq=po * po, rp=ao * (1.0 - ecco), rteosq=rteosq, sinio=sinio,
        gsto=gsto,
    )


def _setup_deep_space(sat: Satellite, epoch: float, eccsq: float,
                      xpidot: float) -> None:
    sat.method = "d"
    sat.isimp = 1
    tc = 0.0
    inclm = sat.inclo

    common = dscom(epoch, sat.ecco, sat.argpo, tc, sat.inclo, sat.nodeo, sat.no)
    for name in _LUNISOLAR_FIELDS:
        setattr(sat, name, getattr(common, name))

    periodic = dpper(sat, sat.init, sat.ecco, sat.inclo, sat.nodeo, sat.argpo,
                     sat.mo, sat.operationmode)
    sat.ecco = periodic.ep
    sat.inclo = periodic.inclp
    sat.nodeo = periodic.nodep
    sat.argpo = periodic.argpp
    sat.mo = periodic.mp

    resonance = dsinit(sat.gravity_const, common, sat.argpo, sat.t, tc,
                       sat.gsto, sat.mo, sat.mdot, sat.no, sat.nodeo,
                       sat.nodedot, xpidot, sat.ecco, eccsq, common.em,
                       0.0, inclm, 0.0, common.nm, 0.0)
    for name in _RESONANCE_FIELDS:
        setattr(sat, name, getattr(resonance, name))


def _setup_drag_terms(sat: Satellite, ao: float, tsi: float, sfour: float) -> None:
    cc1 = sat.cc1
    cc1sq = cc1 * cc1
    sat.d2 = 4.0 * ao * tsi * cc1sq
    temp = sat.d2 * tsi * cc1 / 3.0
    sat.d3 = (17.0 * ao + sfour) * temp
    sat.d4 = 0.5 * temp * ao * tsi * (221.0 * ao + 31.0 * sfour) * cc1
    sat.t3cof = sat.d2 + 2.0 * cc1sq
    sat.t4cof = 0.25 * (3.0 * sat.d3 + cc1 * (12.0 * sat.d2 + 10.0 * cc1sq))
    sat.t5cof = 0.2 * (3.0 * sat.d4 + 12.0 * cc1 * sat.d3
                       + 6.0 * sat.d2 * sat.d2
                       + 15.0 * cc1sq * (2.0 * sat.d2 + cc1sq))


def sgp4init(epoch: float, sat: Satellite) -> tuple[Vector3, Vector3]:
    """Initialise ``sat`` in place and return its position and velocity at epoch.

    ``epoch`` is in days since 1950 January 0.0. Raises an SGP4Error when
    the state at epoch is invalid.
    """
    sat.method = "n"
    sat.operationmode = "i"

    grav = sat.gravity_const
    radiusearthkm = grav.radiusearthkm
    j2 = grav.j2
    j4 = grav.j4
    j3oj2 = grav.j3oj2

    ss = 78.0 / radiusearthkm + 1.0
    qzms2ttemp = (120.0 - 78.0) / radiusearthkm
    qzms2t = qzms2ttemp * qzms2ttemp * qzms2ttemp * qzms2ttemp

    sat.init = "y"
    sat.t = 0.0

    il = initl(grav, sat.ecco, epoch, sat.inclo, sat.no, sat.operationmode)
    sat.no = il.no
    sat.con41 = il.con41
    sat.gsto = il.gsto

    if il.omeosq >= 0.0 or sat.no >= 0.0:
        ao = il.ao
        cosio = il.cosio
        cosio2 = il.cosio2
        omeosq = il.omeosq

        sat.isimp = 1 if il.rp < 220.0 / radiusearthkm + 1.0 else 0
        sfour = ss
        qzms24 = qzms2t
        perige = (il.rp - 1.0) * radiusearthkm

        if perige < 156.0:
            sfour = perige - 78.0
            if perige < 98.0:
                sfour = 20.0
            qzms24temp = (128.0 - sfour) / radiusearthkm
            qzms24 = qzms24temp * qzms24temp * qzms24temp * qzms24temp
            sfour = sfour / radiusearthkm + 1.0

        pinvsq = 1.0 / il.posq
        tsi = 1.0 / (ao - sfour)
        sat.eta = ao * sat.ecco * tsi
        etasq = sat.eta * sat.eta
        eeta = sat.ecco * sat.eta
        psisq = abs(1.0 - etasq)
        coef = qzms24 * math.pow(tsi, 4.0)
        coef1 = coef / math.pow(psisq, 3.5)
        cc2 = coef1 * sat.no * (
            ao * (1.0 + 1.5 * etasq + eeta * (4.0 + etasq))
            + 0.375 * j2 * tsi / psisq * sat.con41
            * (8.0 + 3.0 * etasq * (8.0 + etasq)))
        sat.cc1 = sat.bstar * cc2
        cc3 = 0.0
        if sat.ecco > 1.0e-4:
            cc3 = -2.0 * coef * tsi * j3oj2 * sat.no * il.sinio / sat.ecco

        sat.x1mth2 = 1.0 - cosio2
        sat.cc4 = 2.0 * sat.no * coef1 * ao * omeosq * (
            sat.eta * (2.0 + 0.5 * etasq) + sat.ecco * (0.5 + 2.0 * etasq)
            - j2 * tsi / (ao * psisq) * (
                -3.0 * sat.con41 * (1.0 - 2.0 * eeta + etasq * (1.5 - 0.5 * eeta))
                + 0.75 * sat.x1mth2 * (2.0 * etasq - eeta * (1.0 + etasq))
                * math.cos(2.0 * sat.argpo)))
        sat.cc5 = 2.0 * coef1 * ao * omeosq * (1.0 + 2.75 * (etasq + eeta)
                                               + eeta * etasq)
        cosio4 = cosio2 * cosio2
        temp1 = 1.5 * j2 * pinvsq * sat.no
        temp2 = 0.5 * temp1 * j2 * pinvsq
        temp3 = -0.46875 * j4 * pinvsq * pinvsq * sat.no

        sat.mdot = (sat.no + 0.5 * temp1 * il.rteosq * sat.con41
                    + 0.0625 * temp2 * il.rteosq
                    * (13.0 - 78.0 * cosio2 + 137.0 * cosio4))
        sat.argpdot = (-0.5 * temp1 * il.con42
                       + 0.0625 * temp2 * (7.0 - 114.0 * cosio2 + 395.0 * cosio4)
                       + temp3 * (3.0 - 36.0 * cosio2 + 49.0 * cosio4))
        xhdot1 = -temp1 * cosio
        sat.nodedot = xhdot1 + (0.5 * temp2 * (4.0 - 19.0 * cosio2)
                                + 2.0 * temp3 * (3.0 - 7.0 * cosio2)) * cosio
        xpidot = sat.argpdot + sat.nodedot

        sat.omgcof = sat.bstar * cc3 * math.cos(sat.argpo)
        sat.xmcof = 0.0
        if sat.ecco > 1.0e-4:
            sat.xmcof = -_X2O3 * coef * sat.bstar / eeta
        sat.nodecf = 3.5 * omeosq * xhdot1 * sat.cc1
        sat.t2cof = 1.5 * sat.cc1

        denominator = 1.0 + cosio if abs(cosio + 1.0) > 1.5e-12 else _TEMP4
        sat.xlcof = -0.25 * j3oj2 * il.sinio * (3.0 + 5.0 * cosio) / denominator
        sat.aycof = -0.5 * j3oj2 * il.sinio
        delmotemp = 1.0 + sat.eta * math.cos(sat.mo)
        sat.delmo = delmotemp * delmotemp * delmotemp
        sat.sinmao = math.sin(sat.mo)
        sat.x7thm1 = 7.0 * cosio2 - 1.0

        if TWOPI / sat.no >= 225.0:
            _setup_deep_space(sat, epoch, il.eccsq, xpidot)

        if sat.isimp != 1:
            _setup_drag_terms(sat, ao, tsi, sfour)

    try:
        return sgp4(sat, 0.0)
    finally:
        sat.init = "n"


def tle_to_sat(line1: str, line2: str, gravity: Gravity | str) -> Satellite:
    """Parse an element set and return an initialised Satellite.

    Raises TLEParseError for a malformed set, ValueError for an unknown
    gravity model and an SGP4Error when the state at epoch is invalid.
    """
    tle = parse_tle(line1, line2)
    sat = Satellite(
        tle=tle,
        gravity_const=get_grav_const(gravity),
        epochyr=tle.epoch_year,
        epochdays=tle.epoch_day,
        ndot=tle.first_time_derivative_of_mean_motion / (XPDOTP * 1440.0),
        nddot=tle.second_time_derivative_of_mean_motion / (XPDOTP * 1440.0 * 1440),
        bstar=tle.bstar,
        inclo=tle.inclination * DEG2RAD,
        nodeo=tle.right_ascension_of_ascending_node * DEG2RAD,
        ecco=tle.eccentricity,
        argpo=tle.argument_of_perigee * DEG2RAD,
        mo=tle.mean_anomaly * DEG2RAD,
        no=tle.mean_motion / XPDOTP,
    )

    year = tle.epoch_year + 2000 if tle.epoch_year < 57 else tle.epoch_year + 1900
    month, day, hour, minute, second = days2mdhms(year, tle.epoch_day)
    sat.jdsatepoch = jday(year, int(month), int(day), int(hour), int(minute), second)

    sgp4init(sat.jdsatepoch - 2433281.5, sat)
    return sat