from phongrt.camera.camera import Camera, Config

__all__ = ["Camera", "Config"]
