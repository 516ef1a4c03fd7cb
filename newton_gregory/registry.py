'''
orientation name -> interpolant class
'''


class InterpolantRegistry(object):
    def __init__(self):
        self.classes = {}

    def register(self, orientation):
        def wrapper(interpolant_class):
            if orientation in self.classes:
                raise ValueError("orientation {} already registered by {}".format(
                    orientation, self.classes[orientation].__name__))
            self.classes[orientation] = interpolant_class
            return interpolant_class
        return wrapper

    def get(self, orientation):
        try:
            return self.classes[orientation]
        except KeyError:
            raise ValueError("no interpolant for orientation {}, expected one of {}".format(
                orientation, self.names())) from None

    def build(self, orientation, x, y, **kwargs):
        return self.get(orientation)(x, y, **kwargs)

    def names(self):
        return sorted(self.classes)

interpolator = InterpolantRegistry()
