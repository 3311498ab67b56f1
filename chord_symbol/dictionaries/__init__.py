"""Static lookup tables shared by the parser and the renderer."""
