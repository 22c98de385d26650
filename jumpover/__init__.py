from .arc import ARC_KAPPA, ArcDescriptor, CubicBezier, make_arc
from .config import DEFAULT_OPTIONS, JumpOverOptions
from .geometry import DegenerateSegmentError, dir_len, intersect
from .loader import SceneFormatError, load_scene, load_scene_data, load_scene_file
from .orientation import JumperChoice, choose_jumper, is_horizontal, rotation_degrees
from .paints import RGB, GradientPaint, SolidPaint, hex_to_rgb, paint_to_hex
from .pipeline import Outcome, run_once
from .plugin import run_plugin
from .printer import dump_scene, print_scene
from .scene import (
    MIXED,
    GroupNode,
    LineNode,
    Page,
    VectorNetwork,
    VectorNode,
    VectorSegment,
    VectorVertex,
    collect_lines,
    materialize_arc,
    resolve_point,
)
from .segments import ResolvedSegment, resolve_segment
from .svg_codegen import generate_svg_code, generate_svg_document
from .transforms import IDENTITY, Transform, apply_transform, compose

__all__ = [
    'ARC_KAPPA',
    'ArcDescriptor',
    'CubicBezier',
    'make_arc',
    'DEFAULT_OPTIONS',
    'JumpOverOptions',
    'DegenerateSegmentError',
    'dir_len',
    'intersect',
    'SceneFormatError',
    'load_scene',
    'load_scene_data',
    'load_scene_file',
    'JumperChoice',
    'choose_jumper',
    'is_horizontal',
    'rotation_degrees',
    'RGB',
    'GradientPaint',
    'SolidPaint',
    'hex_to_rgb',
    'paint_to_hex',
    'Outcome',
    'run_once',
    'run_plugin',
    'dump_scene',
    'print_scene',
    'MIXED',
    'GroupNode',
    'LineNode',
    'Page',
    'VectorNetwork',
    'VectorNode',
    'VectorSegment',
    'VectorVertex',
    'collect_lines',
    'materialize_arc',
    'resolve_point',
    'ResolvedSegment',
    'resolve_segment',
    'generate_svg_code',
    'generate_svg_document',
    'IDENTITY',
    'Transform',
    'apply_transform',
    'compose',
]
