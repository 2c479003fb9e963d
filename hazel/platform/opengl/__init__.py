"""OpenGL implementations of buffers, vertex arrays, shaders, textures, context and draw commands."""