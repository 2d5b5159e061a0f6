import ctypes
from OpenGL import GL


class Mesh:
    """GPU copy of a GeometryNode's vertex, uv and index arrays."""

    def __init__(self, verts, uvs, indices):
        self.index_count = len(indices)

        self.vbo_pos = GL.glGenBuffers(1)
        self.vbo_uv = GL.glGenBuffers(1)
        self.ebo = GL.glGenBuffers(1)

        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, self.vbo_pos)
        GL.glBufferData(GL.GL_ARRAY_BUFFER, verts.nbytes, verts, GL.GL_STATIC_DRAW)

        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, self.vbo_uv)
        GL.glBufferData(GL.GL_ARRAY_BUFFER, uvs.nbytes, uvs, GL.GL_STATIC_DRAW)

        GL.glBindBuffer(GL.GL_ELEMENT_ARRAY_BUFFER, self.ebo)
        GL.glBufferData(GL.GL_ELEMENT_ARRAY_BUFFER, indices.nbytes, indices, GL.GL_STATIC_DRAW)

    @classmethod
    def from_node(cls, node):
        return cls(node.vertices, node.uvs, node.indices)

    def bind(self, loc_pos: int, loc_uv: int):
        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, self.vbo_pos)
        GL.glEnableVertexAttribArray(loc_pos)
        GL.glVertexAttribPointer(loc_pos, 3, GL.GL_FLOAT, GL.GL_FALSE, 0, ctypes.c_void_p(0))

        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, self.vbo_uv)
        GL.glEnableVertexAttribArray(loc_uv)
        GL.glVertexAttribPointer(loc_uv, 2, GL.GL_FLOAT, GL.GL_FALSE, 0, ctypes.c_void_p(0))

        GL.glBindBuffer(GL.GL_ELEMENT_ARRAY_BUFFER, self.ebo)

    def draw(self):
        GL.glDrawElements(GL.GL_TRIANGLES, self.index_count, GL.GL_UNSIGNED_INT, None)

    def dispose(self):
        GL.glDeleteBuffers(3, [self.vbo_pos, self.vbo_uv, self.ebo])
        self.vbo_pos = self.vbo_uv = self.ebo = 0
        self.index_count = 0
