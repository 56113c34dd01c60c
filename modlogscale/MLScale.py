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
import sys
from collections import namedtuple

import numpy as np
from matplotlib import cbook

import modlogscale.MLConfig as mlconf
from modlogscale.MLErrors import ModLogError, invalidBaseError, nonFiniteDomainError
from modlogscale.MLLinear import LinearScale, isNumber, checkNumberPair
from modlogscale.MLTransform import adjustedLog, invertedAdjustedLog, modifiedLogTransform, \
    inverseModifiedLogTransform, snappedLog, is_close_to_int, nearest_int

#Outcome of ModifiedLogScale.tryCreate, exactly one of the members is None
ScaleResult = namedtuple('ScaleResult', ['scale', 'error'])

DOMAIN_CHANGED = 'domainChanged'


class ModifiedLogScale:
    """
    **Overview**

    | A ModifiedLogScale acts as a regular log scale for large numbers.
    | As it approaches 0, it gradually becomes linear. This means that the scale handles 0 and
    | negative numbers, where an ordinary log scale would not.
    |
    | It also means that the scale is effectively linear as values approach 0. If very small values
    | should be spread out logarithmically, use an ordinary log scale instead.
    |
    | For base <= x, scale(x) follows log(x).
    | For 0 < x < base, scale(x) becomes more and more linear as it approaches 0.
    | At x == 0, scale(x) == 0.
    | For negative values, scale(-x) = -scale(x).

    **Members**

    base, float
        Base of the log, must be > 1. Read only.
    pivot, float
        Threshold below which the scale blends into linear, always equal to base. Read only.

    **Methods**

    scale(x), invert(y)
        Forward and inverse mapping, accept float/int or list-like/np.ndarray.
    getDomain(), setDomain(lo, hi)
        Untransformed domain. setDomain notifies subscribers synchronously.
    getRange(), setRange(lo, hi)
        Output range of the underlying linear mapping.
    ticks(count=None)
        Tick values spanning the domain, ascending.
    subscribe(listener), unsubscribe(cid)
        Register/remove a callable invoked with the scale after every setDomain.
    copy()
        Fresh scale with the same base, nothing else is carried over.

    **Examples**

    >>> s = ModifiedLogScale(10)
    >>> s.setDomain(-100, 100)
    >>> s.setRange(0, 400)
    >>> s.scale(0)
    200.0
    """

    def __init__(self, base=None):
        if base is None:
            base = mlconf.ml_defaultBase
        if not isNumber(base):
            raise TypeError("in ModifiedLogScale: base must be float/int, found: "+str(type(base)))
        if not (math.isfinite(base) and base > 1):
            raise invalidBaseError("in ModifiedLogScale:")
        self._base = float(base)
        self._pivot = self._base
        self._linearScale = LinearScale()
        self._callbacks = cbook.CallbackRegistry(exception_handler=None)
        self._lastRequestedTickCount = mlconf.ml_defaultTickCount
        lo, hi = mlconf.ml_defaultDomain
        self._untransformedDomain = (float(lo), float(hi))
        self._linearScale.setDomain(self._adjustedLog(lo), self._adjustedLog(hi))

    @classmethod
    def tryCreate(cls, base=None):
        """
        Construct without raising. Returns ScaleResult(scale, None) on success and
        ScaleResult(None, error) if the base is rejected.
        """
        try:
            return ScaleResult(cls(base), None)
        except (ModLogError, TypeError) as e:
            return ScaleResult(None, e)

    @property
    def base(self):
        return self._base

    @property
    def pivot(self):
        return self._pivot

    def _adjustedLog(self, x):
        return adjustedLog(x, self._base, self._pivot)

    def scale(self, x):
        if isNumber(x):
            return self._linearScale.scale(self._adjustedLog(x))
        return self._linearScale.scale(modifiedLogTransform(x, self._base, self._pivot))

    def invert(self, y):
        if isNumber(y):
            return invertedAdjustedLog(self._linearScale.invert(y), self._base, self._pivot)
        return inverseModifiedLogTransform(self._linearScale.invert(y), self._base, self._pivot)

    def getDomain(self):
        return self._untransformedDomain

    def setDomain(self, lo, hi):
        """
        Stores the untransformed domain as given, without reordering, and hands the log-adjusted
        bounds to the underlying linear mapping. Subscribers are then called synchronously.
        A subscriber that calls setDomain again recurses, guarding against that is up to the caller.
        """
        lo, hi = checkNumberPair(lo, hi, "ModifiedLogScale.setDomain", nonFiniteDomainError)
        self._untransformedDomain = (lo, hi)
        self._linearScale.setDomain(self._adjustedLog(lo), self._adjustedLog(hi))
        if mlconf.ml_verbose:
            reportStr = "ModifiedLogScale domain set to ["+str(lo)+", "+str(hi)+"]\n"
            sys.stderr.write(reportStr)
        self._callbacks.process(DOMAIN_CHANGED, self)

    def getRange(self):
        return self._linearScale.getRange()

    def setRange(self, lo, hi):
        self._linearScale.setRange(lo, hi)

    def subscribe(self, listener):
        """
        Register listener(scale) to be called after every setDomain, returns an id for unsubscribe.
        Bound methods are only weakly referenced, as for other matplotlib callbacks.
        """
        return self._callbacks.connect(DOMAIN_CHANGED, listener)

    def unsubscribe(self, cid):
        self._callbacks.disconnect(cid)

    def niceDomain(self, domain, count=None):
        # This scale never extends its domain to round values
        return domain

    def copy(self):
        return ModifiedLogScale(self._base)

    def ticks(self, count=None):
        """
        Returns ticks covering the domain, as an ascending np.ndarray.

        Say the domain is [-100, 100] and the pivot is 10. Then negative log ticks are drawn
        from -100 to -10, linear ticks from -10 to 10 and positive log ticks from 10 to 100.
        Each of the three parts gets a share of the tick count proportional to how much of
        the axis it takes up once transformed.

        A zero-width domain gives its single value. A narrow domain lying between two cluster
        values, such as [9.99, 10.01] in base 2, gives no ticks at all.

        **Parameters**

        count, int, optional, default: None
            Desired number of ticks. If passed it is remembered for later calls without a count.

        **Returns**
            np.ndarray of float
        """
        if count is not None:
            if not isNumber(count):
                raise TypeError("in ModifiedLogScale.ticks: count must be int, found: "+str(type(count)))
            self._lastRequestedTickCount = int(count)

        vmin = min(self._untransformedDomain)
        vmax = max(self._untransformedDomain)
        if self._adjustedLog(vmin) == self._adjustedLog(vmax):
            if mlconf.ml_verbose:
                sys.stderr.write("ModifiedLogScale domain has zero width, returning its single value as tick\n")
            return np.array([vmin], dtype=np.float64)

        negativeLower = vmin
        negativeUpper = middle(vmin, vmax, -self._pivot)
        positiveLower = middle(vmin, vmax, self._pivot)
        positiveUpper = vmax

        negativeLogTicks = -self.logTicks(-negativeUpper, -negativeLower)[::-1]
        positiveLogTicks = self.logTicks(positiveLower, positiveUpper)
        linearTicks = LinearScale(domain=(negativeUpper, positiveLower)).ticks(self.howManyTicks(negativeUpper, positiveLower))

        Ticlocs = uniqueTicks(np.concatenate([negativeLogTicks, linearTicks, positiveLogTicks]))
        if mlconf.ml_verbose:
            reportStr = "ModifiedLogScale generated "+str(len(Ticlocs))+" ticks, "+str(self._lastRequestedTickCount)+" requested\n"
            sys.stderr.write(reportStr)
        return Ticlocs

    def logTicks(self, lower, upper):
        """
        Return an appropriate number of ticks from lower to upper, both > 0.

        This first tries to fit as many powers of the base as it can from lower to upper.

        If it still has ticks after that, it generates ticks in "clusters",
        e.g. [20, 30, ... 90, 100] is a cluster, [200, 300, ... 900, 1000] is another cluster.

        Clusters are made as large as possible while not drastically exceeding the number of ticks.
        """
        nTicks = self.howManyTicks(lower, upper)
        if nTicks <= 0:
            return np.array([], dtype=np.float64)
        startLogged = math.floor(snappedLog(lower, self._base))
        endLogged = math.ceil(snappedLog(upper, self._base))
        powerStep = math.ceil((endLogged - startLogged) / nTicks)
        bases = list(range(endLogged, startLogged, -powerStep))
        if len(bases) == 0:
            return np.array([], dtype=np.float64)
        nMultiples = max(1, nTicks // len(bases))
        # Descending from the base towards 1 (exclusive) in nMultiples even steps
        multiples = np.floor(self._base - np.arange(nMultiples) * (self._base - 1) / nMultiples)
        uniqMultiples = uniqueInOrder(multiples)
        clusters = [self._base ** (b - 1) * uniqMultiples for b in bases]
        flattened = np.concatenate(clusters)
        filtered = flattened[(lower <= flattened) & (flattened <= upper)]
        return np.unique(filtered)

    def howManyTicks(self, lower, upper):
        """
        How many ticks does the range [lower, upper] deserve?

        e.g. if the domain is [10, 1000], howManyTicks(10, 100) gives 1/2 of the ticks,
        since [10, 100] takes up 1/2 of the distance when plotted.
        A domain with zero width once transformed gives 0.
        Unlike a plain ceiling, a budget within ml_tickTolerance of a whole number is rounded to it.
        """
        adjustedMin = self._adjustedLog(min(self._untransformedDomain))
        adjustedMax = self._adjustedLog(max(self._untransformedDomain))
        if adjustedMax == adjustedMin:
            return 0
        adjustedLower = self._adjustedLog(lower)
        adjustedUpper = self._adjustedLog(upper)
        proportion = (adjustedUpper - adjustedLower) / (adjustedMax - adjustedMin)
        budget = proportion * self._lastRequestedTickCount
        # log10(1000) is 2.9999999999999996, keep such noise from costing an extra tick
        if is_close_to_int(budget):
            return nearest_int(budget)
        return int(math.ceil(budget))


def middle(x, y, z):
    'median of three values'
    return sorted([x, y, z])[1]


def uniqueInOrder(values):
    seen = set()
    uniq = []
    for value in values:
        if value not in seen:
            seen.add(value)
            uniq.append(value)
    return np.asarray(uniq, dtype=np.float64)


def uniqueTicks(Ticlocs):
    """
    Sorts ticks and merges values that only differ by floating point noise,
    such as a log tick at 10 and a linear tick at 10.000000000000002.
    """
    Ticlocs = np.sort(np.asarray(Ticlocs, dtype=np.float64))
    if len(Ticlocs) < 2:
        return Ticlocs
    tolerance = mlconf.ml_tickTolerance * np.maximum(1.0, np.abs(Ticlocs[1:]))
    keep = np.concatenate([[True], np.diff(Ticlocs) > tolerance])
    return Ticlocs[keep]
