import ctypes
import logging

from OpenGL import GL

from panoview.constants import Z_FAR, Z_NEAR
from panoview.math_utils import mat4_perspective
from panoview.render.mesh import Mesh
from panoview.render.shaders import (
    compile_shader,
    link_program,
    VERT_SRC,
    FRAG_SRC,
    FLAT_VERT_SRC,
    FLAT_FRAG_SRC,
)
from panoview.render.texture import Texture

logger = logging.getLogger(__name__)

_CULL = {
    "front": GL.GL_FRONT,
    "back": GL.GL_BACK,
}

_PRIMITIVE = {
    "fan": GL.GL_TRIANGLE_FAN,
    "strip": GL.GL_TRIANGLE_STRIP,
}


class Renderer:
    def __init__(self):
        vs = compile_shader(VERT_SRC, GL.GL_VERTEX_SHADER)
        fs = compile_shader(FRAG_SRC, GL.GL_FRAGMENT_SHADER)
        self.prog = link_program(vs, fs)

        flat_vs = compile_shader(FLAT_VERT_SRC, GL.GL_VERTEX_SHADER)
        flat_fs = compile_shader(FLAT_FRAG_SRC, GL.GL_FRAGMENT_SHADER)
        self.flat_prog = link_program(flat_vs, flat_fs)

        self.pano_locs = {
            'a_pos': GL.glGetAttribLocation(self.prog, "a_pos"),
            'a_uv': GL.glGetAttribLocation(self.prog, "a_uv"),
            'u_mvp': GL.glGetUniformLocation(self.prog, "u_mvp"),
            'u_src': GL.glGetUniformLocation(self.prog, "u_src"),
            'u_uv_scale_x': GL.glGetUniformLocation(self.prog, "u_uv_scale_x"),
        }

        self.flat_locs = {
            'a_pos': GL.glGetAttribLocation(self.flat_prog, "a_pos"),
            'u_color': GL.glGetUniformLocation(self.flat_prog, "u_color"),
        }

        self.overlay_vbo = GL.glGenBuffers(1)

        self._generation = -1
        self._mesh = None
        self._texture = None
        self._material = None

    def draw_frame(self, fb_size, view):
        fb_w, fb_h = fb_size
        GL.glViewport(0, 0, fb_w, fb_h)
        GL.glClearColor(0.0, 0.0, 0.0, 1.0)
        GL.glClear(GL.GL_COLOR_BUFFER_BIT | GL.GL_DEPTH_BUFFER_BIT)

        self._sync_scene(view.scene)

        if self._mesh is not None:
            aspect = fb_w / float(fb_h if fb_h else 1)
            proj = mat4_perspective(view.camera.vertical_fov, aspect, Z_NEAR, Z_FAR)
            mvp = proj @ view.camera.view_matrix()
            self._draw_panorama(mvp)

        overlay = view.overlay
        if overlay is not None:
            self._draw_overlay(overlay.shapes(fb_w, fb_h))

        self._reset_state()

    def _sync_scene(self, scene):
        # Re-upload only when the scene swapped its geometry node.
        if scene.generation == self._generation:
            return
        self._generation = scene.generation
        self._release()

        node = scene.geometry_node
        if node is None:
            return
        self._mesh = Mesh.from_node(node)
        self._texture = Texture(node.material)
        self._material = node.material
        logger.debug("[render] Uploaded %s mesh (%d indices, texture %dx%d)",
                     node.kind.value, self._mesh.index_count, self._texture.width, self._texture.height)

    def _release(self):
        if self._mesh is not None:
            self._mesh.dispose()
        if self._texture is not None:
            self._texture.dispose()
        self._mesh = None
        self._texture = None
        self._material = None

    def _draw_panorama(self, mvp):
        GL.glDisable(GL.GL_DEPTH_TEST)
        GL.glEnable(GL.GL_CULL_FACE)
        GL.glFrontFace(GL.GL_CCW)
        GL.glCullFace(_CULL.get(self._material.cull_face, GL.GL_FRONT))

        GL.glUseProgram(self.prog)
        GL.glUniform1i(self.pano_locs['u_src'], 0)
        GL.glUniform1f(self.pano_locs['u_uv_scale_x'], self._material.uv_scale_x)
        GL.glUniformMatrix4fv(self.pano_locs['u_mvp'], 1, GL.GL_TRUE, mvp)

        self._texture.bind(0)
        self._mesh.bind(self.pano_locs['a_pos'], self.pano_locs['a_uv'])
        self._mesh.draw()

    def _draw_overlay(self, shapes):
        if not shapes:
            return
        GL.glDisable(GL.GL_CULL_FACE)
        GL.glEnable(GL.GL_BLEND)
        GL.glBlendFunc(GL.GL_SRC_ALPHA, GL.GL_ONE_MINUS_SRC_ALPHA)
        GL.glUseProgram(self.flat_prog)

        loc_pos = self.flat_locs['a_pos']
        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, self.overlay_vbo)
        GL.glEnableVertexAttribArray(loc_pos)
        for shape in shapes:
            pts = shape.points
            GL.glBufferData(GL.GL_ARRAY_BUFFER, pts.nbytes, pts, GL.GL_STREAM_DRAW)
            GL.glVertexAttribPointer(loc_pos, 2, GL.GL_FLOAT, GL.GL_FALSE, 0, ctypes.c_void_p(0))
            GL.glUniform4f(self.flat_locs['u_color'], *shape.color)
            GL.glDrawArrays(_PRIMITIVE[shape.mode], 0, len(pts))

    def _reset_state(self):
        GL.glFrontFace(GL.GL_CCW)
        GL.glDisable(GL.GL_CULL_FACE)
        GL.glDisable(GL.GL_DEPTH_TEST)
        GL.glDisable(GL.GL_BLEND)
        GL.glBindBuffer(GL.GL_ARRAY_BUFFER, 0)
        GL.glBindBuffer(GL.GL_ELEMENT_ARRAY_BUFFER, 0)

    def dispose(self):
        self._release()
        GL.glDeleteBuffers(1, [self.overlay_vbo])
        GL.glDeleteProgram(self.prog)
        GL.glDeleteProgram(self.flat_prog)
