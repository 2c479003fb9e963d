"""Renderer interfaces, buffer layouts, camera, transforms, resource factory and scene submission."""