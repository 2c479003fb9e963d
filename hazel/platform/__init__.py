"""Platform backends: a pyglet window and input, and the OpenGL renderer implementation."""