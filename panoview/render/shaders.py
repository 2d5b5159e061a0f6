from OpenGL import GL

VERT_SRC = r"""
#version 120
attribute vec3 a_pos;
attribute vec2 a_uv;

uniform mat4 u_mvp;
uniform float u_uv_scale_x;  // -1.0 mirrors the panorama horizontally

varying vec2 v_uv;

void main() {
    v_uv = vec2(a_uv.x * u_uv_scale_x, a_uv.y);
    gl_Position = u_mvp * vec4(a_pos, 1.0);
}
"""

FRAG_SRC = r"""
#version 120
uniform sampler2D u_src;  // panorama, S wraps with GL_REPEAT

varying vec2 v_uv;

void main() {
    gl_FragColor = texture2D(u_src, v_uv);
}
"""

FLAT_VERT_SRC = r"""
#version 120
attribute vec2 a_pos;  // already in NDC

void main() {
    gl_Position = vec4(a_pos, 0.0, 1.0);
}
"""

FLAT_FRAG_SRC = r"""
#version 120
uniform vec4 u_color;

void main() {
    gl_FragColor = u_color;
}
"""


def compile_shader(src: str, shader_type):
    sh = GL.glCreateShader(shader_type)
    GL.glShaderSource(sh, src)
    GL.glCompileShader(sh)
    ok = GL.glGetShaderiv(sh, GL.GL_COMPILE_STATUS)
    if not ok:
        log = GL.glGetShaderInfoLog(sh).decode("utf-8", "replace")
        raise RuntimeError(f"Shader compile failed:\n{log}")
    return sh


def link_program(vs, fs):
    prog = GL.glCreateProgram()
    GL.glAttachShader(prog, vs)
    GL.glAttachShader(prog, fs)
    GL.glLinkProgram(prog)
    ok = GL.glGetProgramiv(prog, GL.GL_LINK_STATUS)
    if not ok:
        log = GL.glGetProgramInfoLog(prog).decode("utf-8", "replace")
        raise RuntimeError(f"Program link failed:\n{log}")
    return prog
