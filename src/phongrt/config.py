"""
Default settings for the command line renderer.
"""

# Rendering settings
RENDER_SETTINGS = {
    'scene': 'simple',
    'width': 200,
    'height': 100,
    'output': 'out.ppm',
}

# Preview window settings
DISPLAY_SETTINGS = {
    'caption': 'phongrt',
    'scale': 1,
    'fps': 30,
}

# Logging
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
