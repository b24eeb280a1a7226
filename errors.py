# errors.py

class NoiseError(ValueError):
    pass

class InvalidArgumentError(NoiseError):
    pass

class OutOfBoundsError(NoiseError):
    pass

class FieldNotPopulatedError(NoiseError):
    pass
