"""Load failures raised by the asset pipeline. All of them are fatal at startup."""


class AssetError(Exception):
    def __init__(self, name, message):
        super().__init__(f"{name}: {message}")
        self.name = name


class DecodeError(AssetError):
    """Embedded bytes could not be parsed as PNG, TTF or MP3."""


class OutOfBoundsError(AssetError, ValueError):
    """A sprite rectangle does not fit inside its atlas."""

    def __init__(self, name, rect, atlas_size):
        w, h, x, y = rect
        aw, ah = atlas_size
        super().__init__(name, f"{w}x{h} at ({x},{y}) outside {aw}x{ah} atlas")
        self.rect = rect
        self.atlas_size = atlas_size


class ContextBindingError(AssetError):
    """A decoded stream could not be attached to the audio context."""
