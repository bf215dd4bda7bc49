from ray_caster.ray_tracer import run

run()
