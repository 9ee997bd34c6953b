"""UDP robot-car remote control, mesh index containers and 3x3 matrix math."""

__version__ = "0.1.0"

__all__ = [
    "dvector",
    "iterators",
    "refcount_vector",
    "index_util",
    "small_list_set",
    "remote_client",
    "matrix3",
    "matrix3_transforms",
    "matrix3_analysis",
]