"""
High-level API for working with CEL and CL2 files.

The main entry point is :py:class:`~cel_tools.api.cel_image.CelImage`, which
reads the frame index of a file and decodes its frames into
:py:class:`~cel_tools.api.frame.Frame` objects.

Key modules:

- :py:mod:`cel_tools.api.cel_image`: Main CelImage class
- :py:mod:`cel_tools.api.frame`: Decoded frame and frame assembly
- :py:mod:`cel_tools.api.pil_io`: Conversion to Pillow images
- :py:mod:`cel_tools.api.numpy_io`: Conversion to NumPy arrays
"""
