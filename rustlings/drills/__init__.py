"""Worked solutions to the exercises, in Python."""