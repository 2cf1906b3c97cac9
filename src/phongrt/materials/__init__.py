from phongrt.materials.material import Material
from phongrt.materials.textures import SolidColor, Stripe, Texture

__all__ = ["Material", "SolidColor", "Stripe", "Texture"]
