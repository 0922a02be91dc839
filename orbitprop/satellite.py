"""State of a satellite before and during propagation."""

from __future__ import annotations

from dataclasses import dataclass

from orbitprop.gravity import GravConst
from orbitprop.tle import TLE


@dataclass
class Satellite:
    """Element set, gravity model and the propagator's working state.

    Angles are in radians, mean motion in radians per minute and times in
    minutes from epoch, as the propagator expects them.
    """

    tle: TLE | None = None
    gravity_const: GravConst | None = None

    epochyr: int = 0
    epochdays: float = 0.0
    jdsatepoch: float = 0.0

    ndot: float = 0.0
    nddot: float = 0.0
    bstar: float = 0.0
    inclo: float = 0.0
    nodeo: float = 0.0
    ecco: float = 0.0
    argpo: float = 0.0
    mo: float = 0.0
    no: float = 0.0

    method: str = "n"
    operationmode: str = "i"
    init: str = "y"

    # Near-earth terms.
    gsto: float = 0.0
    isimp: int = 0
    con41: float = 0.0
    cc1: float = 0.0
    cc4: float = 0.0
    cc5: float = 0.0
    d2: float = 0.0
    d3: float = 0.0
    d4: float = 0.0
    delmo: float = 0.0
    eta: float = 0.0
    argpdot: float = 0.0
    omgcof: float = 0.0
    sinmao: float = 0.0
    t: float = 0.0
    t2cof: float = 0.0
    t3cof: float = 0.0
    t4cof: float = 0.0
    t5cof: float = 0.0
    x1mth2: float = 0.0
    x7thm1: float = 0.0
    mdot: float = 0.0
    nodedot: float = 0.0
    xlcof: float = 0.0
    xmcof: float = 0.0
    nodecf: float = 0.0
    aycof: float = 0.0

    # Deep-space resonance terms.
    irez: int = 0
    d2201: float = 0.0
    d2211: float = 0.0
    d3210: float = 0.0
    d3222: float = 0.0
    d4410: float = 0.0
    d4422: float = 0.0
    d5220: float = 0.0
    d5232: float = 0.0
    d5421: float = 0.0
    d5433: float = 0.0
    dedt: float = 0.0
    del1: float = 0.0
    del2: float = 0.0
    del3: float = 0.0
    didt: float = 0.0
    dmdt: float = 0.0
    dnodt: float = 0.0
    domdt: float = 0.0
    xfact: float = 0.0
    xlamo: float = 0.0
    xli: float = 0.0
    xni: float = 0.0
    atime: float = 0.0

    # Deep-space lunar-solar periodic terms.
    e3: float = 0.0
    ee2: float = 0.0
    peo: float = 0.0
    pgho: float = 0.0
    pho: float = 0.0
    pinco: float = 0.0
    plo: float = 0.0
    se2: float = 0.0
    se3: float = 0.0
    sgh2: float = 0.0
    sgh3: float = 0.0
    sgh4: float = 0.0
    sh2: float = 0.0
    sh3: float = 0.0
    si2: float = 0.0
    si3: float = 0.0
    sl2: float = 0.0
    sl3: float = 0.0
    sl4: float = 0.0
    xgh2: float = 0.0
    xgh3: float = 0.0
    xgh4: float = 0.0
    xh2: float = 0.0
    xh3: float = 0.0
    xi2: float = 0.0
    xi3: float = 0.0
    xl2: float = 0.0
    xl3: float = 0.0
    xl4: float = 0.0
    zmol: float = 0.0
    zmos: float = 0.0