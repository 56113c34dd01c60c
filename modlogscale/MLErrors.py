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


#Some custom errors from template
class ExceptionTemplate(Exception):
    def __call__(self, *args):
        return self.__class__(*(args + self.args))
    def __str__(self):
        return ' '.join(str(arg) for arg in self.args)


#General modlogscale name to create errors
class ModLogError(ExceptionTemplate): pass


class InvalidParameterError(ModLogError): pass


#Some reoccuring, common ones
invalidBaseError=InvalidParameterError("The base must be > 1")
nonFiniteDomainError=InvalidParameterError("domain bounds must be finite")
nonFiniteRangeError=InvalidParameterError("range bounds must be finite")
