"""Vectors, matrices, quaternions, planes and frustums."""