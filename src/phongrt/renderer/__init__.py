from phongrt.renderer.canvas import Canvas

__all__ = ["Canvas"]
