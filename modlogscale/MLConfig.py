#!/usr/bin/env python3
#These flags/variables are accessible throughout modlogscale under namespace mlconf
#example: mlconf.ml_defaultBase, mlconf.ml_verbose

#Base of the logarithm used when ModifiedLogScale() is called without arguments. Must be > 1.
#The pivot, below which the scale turns linear, always equals the base.
ml_defaultBase=10

#Number of ticks a fresh scale asks for until ticks(count) is called with an explicit count
ml_defaultTickCount=10

#Domain and output range a fresh scale starts out with
ml_defaultDomain=(0, 1)
ml_defaultRange=(0, 1)

#Relative tolerance used when merging near-equal ticks and when snapping logarithms to whole powers
ml_tickTolerance=1e-10

#Sets verbosity level, if False nothing is reported to stderr. Does not affect results.
ml_verbose=False


#Check the settings above are sane
from modlogscale.check_config import check_mlconfig
check_mlconfig(ml_defaultBase, ml_defaultTickCount, ml_defaultDomain, ml_defaultRange, ml_tickTolerance, ml_verbose)
