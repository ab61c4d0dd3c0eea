"""Core model: parameters, affine maps, generator and errors."""
