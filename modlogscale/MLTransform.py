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

import modlogscale.MLConfig as mlconf


def adjustedLog(x, base, pivot=None):
    """
    Returns an adjusted log value for graphing purposes.

    Negative values are made positive during the calculation and the answer is negated at the end.
    For values below the pivot, an increasingly large (0 to 1) term is added so that at 0 the
    log argument is exactly 1, resulting in a returned result of 0.

    **Parameters**

    x, float/int
        Untransformed value.

    base, float/int
        Base of the logarithm, must be > 1.

    pivot, float/int, optional, default: None
        Threshold where the blend towards linear begins. Defaults to the base.

    **Returns**
        float

    **Examples**

    >>> adjustedLog(100, 10)
    2.0
    >>> adjustedLog(0, 10)
    0.0
    """
    if pivot is None:
        pivot = base
    negationFactor = -1.0 if x < 0 else 1.0
    x = x * negationFactor

    if x < pivot:
        x += (pivot - x) / pivot

    return negationFactor * logBase(x, base)


def invertedAdjustedLog(y, base, pivot=None):
    """
    Inverse of adjustedLog. See adjustedLog for the parameters.
    """
    if pivot is None:
        pivot = base
    negationFactor = -1.0 if y < 0 else 1.0
    y = y * negationFactor

    try:
        v = base ** y
    except OverflowError:
        return negationFactor * math.inf
    if v < pivot:
        v = (pivot * (v - 1)) / (pivot - 1)

    return negationFactor * v


def modifiedLogTransform(a, base, pivot=None):
    """
    Vectorised adjustedLog, accepts anything np.asarray accepts and keeps the shape.
    """
    if pivot is None:
        pivot = base
    vA = np.asarray(a, dtype=np.float64)
    negationFactor = np.where(vA < 0, -1.0, 1.0)
    vAbs = np.abs(vA)
    vAbs = np.where(vAbs < pivot, vAbs + (pivot - vAbs) / pivot, vAbs)
    tA = negationFactor * np.log(vAbs) / np.log(base)
    return tA


def inverseModifiedLogTransform(a, base, pivot=None):
    """
    Vectorised invertedAdjustedLog, accepts anything np.asarray accepts and keeps the shape.
    """
    if pivot is None:
        pivot = base
    vA = np.asarray(a, dtype=np.float64)
    negationFactor = np.where(vA < 0, -1.0, 1.0)
    with np.errstate(over='ignore'):
        v = np.power(base, np.abs(vA))
    v = np.where(v < pivot, (pivot * (v - 1)) / (pivot - 1), v)
    invA = negationFactor * v
    return invA


def logBase(x, base):
    return math.log(x) / math.log(base)


def snappedLog(x, base):
    'log of x in base, snapped to the nearest int when within tolerance'
    lx = logBase(x, base)
    if is_close_to_int(lx):
        return float(nearest_int(lx))
    return lx


# From Ticker.py
def is_close_to_int(x):
    if not np.isfinite(x):
        return False
    return abs(x - nearest_int(x)) < mlconf.ml_tickTolerance * max(1.0, abs(x))


# From Ticker.py
def nearest_int(x):
    if x == 0:
        return int(0)
    elif x > 0:
        return int(x + 0.5)
    else:
        return int(x - 0.5)
