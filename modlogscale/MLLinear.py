#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
#			~~modlogscale~~
#	log/linear hybrid scale for charting
#
#               /^^\
#   /^^\_______/0  \_
#  (                 `~+++,,_________,,++~^^^^^^^
# ..V^V^V^V^V^V^\.................................
#
#   Distributed under the MIT License

import math
import numpy as np
from matplotlib.ticker import MaxNLocator

import modlogscale.MLConfig as mlconf
from modlogscale.MLErrors import nonFiniteDomainError, nonFiniteRangeError


def isNumber(x):
    return isinstance(x, (float, int, np.number)) and not isinstance(x, (bool, np.bool_))


def checkNumberPair(lo, hi, caller, finiteError):
    if not isNumber(lo) or not isNumber(hi):
        raise TypeError("in "+caller+": bounds must be float/int, found: "+str(type(lo))+", "+str(type(hi)))
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise finiteError("in "+caller+":")
    return float(lo), float(hi)


class LinearScale:
    """
    **Overview**

    | Plain linear mapping from a domain onto an output range, with inverse.
    | ModifiedLogScale owns one of these and feeds it log-adjusted values.

    **Members**

    domain, tuple of two float
        Input interval, defaults to mlconf.ml_defaultDomain.
    range, tuple of two float
        Output interval, defaults to mlconf.ml_defaultRange.

    **Methods**

    scale(x)
        Map a value (or numpy array) from the domain onto the range.
    invert(y)
        Map a value (or numpy array) from the range back onto the domain.
    ticks(count)
        Evenly spaced round values within the domain, roughly count of them.
    copy()
        Independent LinearScale with the same domain and range.
    """

    def __init__(self, domain=None, outputRange=None):
        if domain is None:
            domain = mlconf.ml_defaultDomain
        if outputRange is None:
            outputRange = mlconf.ml_defaultRange
        self._domain = checkNumberPair(domain[0], domain[1], "LinearScale", nonFiniteDomainError)
        self._range = checkNumberPair(outputRange[0], outputRange[1], "LinearScale", nonFiniteRangeError)

    def getDomain(self):
        return self._domain

    def setDomain(self, lo, hi):
        self._domain = checkNumberPair(lo, hi, "LinearScale.setDomain", nonFiniteDomainError)
        return self

    def getRange(self):
        return self._range

    def setRange(self, lo, hi):
        self._range = checkNumberPair(lo, hi, "LinearScale.setRange", nonFiniteRangeError)
        return self

    def scale(self, x):
        d0, d1 = self._domain
        r0, r1 = self._range
        domainSpan = d1 - d0
        if domainSpan == 0:
            # Zero-width domain, everything lands on the start of the range
            return self._fill(x, r0)
        if not isNumber(x):
            x = np.asarray(x, dtype=np.float64)
        return (x - d0) / domainSpan * (r1 - r0) + r0

    def invert(self, y):
        d0, d1 = self._domain
        r0, r1 = self._range
        rangeSpan = r1 - r0
        if rangeSpan == 0:
            return self._fill(y, d0)
        if not isNumber(y):
            y = np.asarray(y, dtype=np.float64)
        return (y - r0) / rangeSpan * (d1 - d0) + d0

    def _fill(self, x, value):
        if isNumber(x):
            return value
        return np.full(np.shape(x), value, dtype=np.float64)

    def ticks(self, count=10):
        """
        Returns roughly count evenly spaced values at 1, 2 or 5 times a power of ten, inside the domain.

        Bounds are inclusive. A count of 0 or less gives no ticks, a zero-width domain gives its single value.
        Steps come from matplotlib's MaxNLocator, which only approximates d3 style ticks(count):
        when count/span is just over a power of ten d3 keeps the smaller step and returns more ticks.
        """
        if count is None or count <= 0:
            return np.array([], dtype=np.float64)
        vmin, vmax = min(self._domain), max(self._domain)
        if vmin == vmax:
            return np.array([vmin], dtype=np.float64)
        locator = MaxNLocator(nbins=int(count), steps=[1, 2, 5, 10])
        ticklocs = np.asarray(locator.tick_values(vmin, vmax), dtype=np.float64)
        slack = mlconf.ml_tickTolerance * (vmax - vmin)
        ticklocs = ticklocs[(ticklocs >= vmin - slack) & (ticklocs <= vmax + slack)]
        # Locator arithmetic can leave -0.0 or values a hair outside the domain
        ticklocs = np.clip(ticklocs, vmin, vmax)
        ticklocs[np.abs(ticklocs) <= slack] = 0.0
        return ticklocs

    def copy(self):
        return LinearScale(self._domain, self._range)
