from __future__ import annotations

from ray_caster.typings.color import BLACK, Color
from ray_caster.typings.light import PointLight
from ray_caster.typings.material import Material
from ray_caster.utils.vector_operations import EPSILON, Vector3, reflect_vector


def lighting(
    material: Material,
    light: PointLight,
    point: Vector3,
    eye_vector: Vector3,
    normal_vector: Vector3,
    in_shadow: bool = False,
) -> Color:
    """Phong shading (ambient + diffuse + specular) of one point for one light.
    A shadowed point only receives the ambient term. The result is not clamped."""
    effective_color = material.color * light.intensity
    ambient = effective_color * material.ambient
    if in_shadow:
        return ambient

    to_light = light.position - point
    if to_light.magnitude() < EPSILON:
        # Light sits on the point: no direction to shade with
        return ambient
    light_vector = to_light.normalize()

    # Cosine between light and normal; negative means the light is behind the surface
    light_dot_normal = light_vector.dot(normal_vector)
    if light_dot_normal < 0.0:
        return ambient

    # Diffuse component: kd * effective_color * dot(L, N)
    diffuse = effective_color * material.diffuse * light_dot_normal

    # Specular component (Phong): ks * light_intensity * dot(R, V)^shininess
    reflect_direction = reflect_vector(-light_vector, normal_vector)
    reflect_dot_eye = reflect_direction.dot(eye_vector)
    specular = BLACK
    if reflect_dot_eye > 0.0:
        specular = light.intensity * material.specular * (reflect_dot_eye ** material.shininess)

    return ambient + diffuse + specular
