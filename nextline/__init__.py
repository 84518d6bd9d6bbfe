"""Line-at-a-time reading from file descriptors through a fixed-size buffer."""

__version__ = "0.1.0"
__all__ = ["reader", "cli"]