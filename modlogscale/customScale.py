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

import numpy as np
from matplotlib import scale as mscale
from matplotlib import transforms as mtransforms
from matplotlib.ticker import Locator, ScalarFormatter, NullLocator, NullFormatter

import modlogscale.MLConfig as mlconf
from modlogscale.MLScale import ModifiedLogScale
from modlogscale.MLTransform import modifiedLogTransform, inverseModifiedLogTransform


class ModifiedLogMplScale(mscale.ScaleBase):
    """
    The ModifiedLogScale as a matplotlib axis scale.

    After importing modlogscale an axis can be switched with
    ax.set_xscale('modifiedlog', base=10)
    """
    name = 'modifiedlog'

    def __init__(self, axis, base=None, numticks=None, **kwargs):
        mscale.ScaleBase.__init__(self, axis)
        # Raises on a bad base before anything is drawn
        self.base = ModifiedLogScale(base).base
        self.numticks = numticks

    def get_transform(self):
        return self.ModifiedLogTransform(self.base)

    def set_default_locators_and_formatters(self, axis):
        axis.set_major_locator(ModifiedLogLocator(self.base, numticks=self.numticks))
        axis.set_major_formatter(ScalarFormatter())
        axis.set_minor_locator(NullLocator())
        axis.set_minor_formatter(NullFormatter())

    def limit_range_for_scale(self, vmin, vmax, minpos):
        # Any finite value is valid on this scale
        return vmin, vmax

    class ModifiedLogTransform(mtransforms.Transform):
        input_dims = 1
        output_dims = 1
        has_inverse = True
        is_separable = True

        def __init__(self, base):
            mtransforms.Transform.__init__(self)
            self.base = base

        def transform_non_affine(self, a):
            return modifiedLogTransform(a, self.base)

        def inverted(self):
            return ModifiedLogMplScale.InvertedModifiedLogTransform(self.base)

    class InvertedModifiedLogTransform(mtransforms.Transform):
        input_dims = 1
        output_dims = 1
        has_inverse = True
        is_separable = True

        def __init__(self, base):
            mtransforms.Transform.__init__(self)
            self.base = base

        def transform_non_affine(self, a):
            return inverseModifiedLogTransform(a, self.base)

        def inverted(self):
            return ModifiedLogMplScale.ModifiedLogTransform(self.base)


class ModifiedLogLocator(Locator):
    """
    Places major ticks with the ModifiedLogScale tick generator: log clusters on both
    sides of the pivot and round linear values in between.
    """

    def __init__(self, base=None, numticks=None):
        self._scale = ModifiedLogScale(base)
        if numticks is None:
            numticks = mlconf.ml_defaultTickCount
        self.numticks = numticks

    def set_params(self, numticks=None):
        """Set parameters within this locator."""
        if numticks is not None:
            self.numticks = numticks

    def __call__(self):
        'Return the locations of the ticks'
        vmin, vmax = self.axis.get_view_interval()
        return self.tick_values(vmin, vmax)

    def tick_values(self, vmin, vmax):
        if vmax < vmin:
            vmin, vmax = vmax, vmin
        self._scale.setDomain(vmin, vmax)
        Ticlocs = self._scale.ticks(self.numticks)
        return self.raise_if_exceeds(np.asarray(Ticlocs))


# Register new scale
mscale.register_scale(ModifiedLogMplScale)
