import math

from modlogscale.MLErrors import ModLogError


def check_mlconfig(ml_defaultBase, ml_defaultTickCount, ml_defaultDomain, ml_defaultRange, ml_tickTolerance, ml_verbose):
    if not isinstance(ml_verbose, bool):
        raise TypeError("ml_verbose must be bool (False/True), found: "+str(type(ml_verbose))+", please review your MLConfig.py")
    if not isinstance(ml_defaultBase, (int, float)) or isinstance(ml_defaultBase, bool):
        raise TypeError("ml_defaultBase must be float/int, found: "+str(type(ml_defaultBase))+", please review your MLConfig.py")
    if not ml_defaultBase > 1:
        raise ModLogError("ml_defaultBase must be > 1, found: "+str(ml_defaultBase)+", please review your MLConfig.py")
    if not isinstance(ml_defaultTickCount, int) or isinstance(ml_defaultTickCount, bool):
        raise TypeError("ml_defaultTickCount must be int, found: "+str(type(ml_defaultTickCount))+", please review your MLConfig.py")
    if ml_defaultTickCount < 0:
        raise ModLogError("ml_defaultTickCount must be >= 0, please review your MLConfig.py")
    pair_names=['ml_defaultDomain', 'ml_defaultRange']
    pairs=[ml_defaultDomain, ml_defaultRange]
    for i in range(0, len(pairs)):
        check_numberPair(pairs[i], pair_names[i])
    if not isinstance(ml_tickTolerance, float):
        raise TypeError("ml_tickTolerance must be float, found: "+str(type(ml_tickTolerance))+", please review your MLConfig.py")
    if not 0 <= ml_tickTolerance < 1:
        raise ModLogError("ml_tickTolerance must be in [0, 1), please review your MLConfig.py")


def check_numberPair(pair, name):
    if not isinstance(pair, (tuple, list)) or len(pair) != 2:
        raise TypeError(name+" must be a tuple/list of two float/int, found: "+str(pair)+", please review your MLConfig.py")
    for value in pair:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise TypeError(name+" must only contain float/int, found: "+str(type(value))+", please review your MLConfig.py")
        if not math.isfinite(value):
            raise ModLogError(name+" must only contain finite values, please review your MLConfig.py")
