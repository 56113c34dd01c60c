#Define functions that users should have access to here

#Config must load first, the other modules read their defaults from it
from modlogscale.MLConfig import ml_defaultBase, ml_defaultTickCount, ml_verbose

from modlogscale.MLErrors import *
from modlogscale.MLTransform import *
from modlogscale.MLLinear import *
from modlogscale.MLScale import *
#Importing customScale registers 'modifiedlog' with matplotlib
from modlogscale.customScale import *
