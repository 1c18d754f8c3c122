"""An OpenGL scene of textured OBJ meshes lit by three rotating coloured spotlights."""

__version__ = "0.1.0"