"""SGP4/SDP4 satellite propagation from two-line element sets, with coordinate conversions."""

__version__ = "0.1.0"