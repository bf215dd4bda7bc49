import argparse
import time

from ray_caster.camera import Camera
from ray_caster.scene_builder import three_spheres_and_plane
from ray_caster.scene_parser import parse_scene_file
from ray_caster.scene_settings import SceneSettings
from ray_caster.utils.shadow_utils import get_profile_counters, reset_profile_counters
from ray_caster.utils.vector_operations import degree_to_radian, radian_to_degree


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Python Ray Caster')
    parser.add_argument('scene_file', type=str, nargs='?', default=None,
                        help='Path to the scene file (default: built-in three spheres and a plane)')
    parser.add_argument('output_image', type=str, help='Name of the output image file (.ppm or any format Pillow writes)')
    parser.add_argument('--width', type=int, default=None, help='Image width')
    parser.add_argument('--height', type=int, default=None, help='Image height')
    parser.add_argument('--fov', type=float, default=None, help='Field of view in degrees')
    parser.add_argument('--workers', type=int, default=None, help='Worker processes (1 renders in this process)')
    parser.add_argument('--rows-per-chunk', type=int, default=None,
                        help='Rows per parallel band (default: derived from the worker count)')
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)

    def log_phase(label: str, seconds: float) -> None:
        print(f"[phase] {label}: {seconds:.2f}s")

    parse_start = time.perf_counter()
    if args.scene_file is None:
        camera, world = three_spheres_and_plane(
            args.width if args.width is not None else 100,
            args.height if args.height is not None else 50,
        )
        scene_settings = None
    else:
        camera, scene_settings, world = parse_scene_file(args.scene_file)
        if camera is None:
            raise ValueError("Scene file is missing a camera ('cam' line)")
    log_phase("parse_scene", time.perf_counter() - parse_start)

    if world.light is None:
        raise ValueError("Scene has no light ('lgt' line)")

    if args.width is not None or args.height is not None or args.fov is not None:
        # Keep the view transform, rebuild the projection
        camera = Camera(
            args.width if args.width is not None else camera.hsize,
            args.height if args.height is not None else camera.vsize,
            degree_to_radian(args.fov) if args.fov is not None else camera.field_of_view,
            camera.transform,
        )

    if scene_settings is None:
        scene_settings = SceneSettings()
    settings = SceneSettings(
        args.workers if args.workers is not None else scene_settings.workers,
        args.rows_per_chunk if args.rows_per_chunk is not None else scene_settings.rows_per_chunk,
    )

    reset_profile_counters()
    render_start = time.perf_counter()
    canvas = camera.render(world, workers=settings.workers, rows_per_chunk=settings.rows_per_chunk)
    log_phase("render", time.perf_counter() - render_start)

    save_start = time.perf_counter()
    canvas.save(args.output_image)
    log_phase("save_image", time.perf_counter() - save_start)

    counters = get_profile_counters()
    print(
        "[stats] fov={fov:.1f}deg, rays={primary_rays}, shadow_rays={shadow_rays}, intersection_tests={intersection_tests}".format(
            fov=radian_to_degree(camera.field_of_view), **counters
        )
    )


def run() -> None:
    program_start = time.time()
    readable_start = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_start))
    print(f"[timer] Program started at {readable_start}")
    try:
        main()
    finally:
        program_end = time.time()
        readable_end = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_end))
        elapsed = program_end - program_start
        print(f"[timer] Program ended at {readable_end} (elapsed {elapsed:.2f}s)")


if __name__ == '__main__':
    run()
