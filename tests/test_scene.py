from flowerkit import colors
from flowerkit.matrix import Matrix4
from flowerkit.scene import (
    DirectionalLight,
    Material,
    MaterialData,
    MeshData,
    Model,
    Transform,
)
from flowerkit.vector import Quaternion, Vector3
from flowerkit.vertex_types import Vertex, VertexElement


def test_material_defaults():
    m = Material()
    assert m.ambient == colors.WHITE
    assert m.emissive == colors.BLACK
    assert m.power == 10.0


def test_light_defaults():
    light = DirectionalLight()
    assert light.direction == Vector3.ZAXIS
    assert light.diffuse == colors.WHITE


def test_default_transform_is_identity():
    assert Transform().matrix() == Matrix4.identity()


def test_transform_translation_in_last_row():
    m = Transform(position=Vector3(1.0, 2.0, 3.0)).matrix()
    assert (m[3, 0], m[3, 1], m[3, 2], m[3, 3]) == (1.0, 2.0, 3.0, 1.0)


def test_transform_scale_on_diagonal():
    m = Transform(scale=Vector3(2.0, 3.0, 4.0)).matrix()
    assert (m[0, 0], m[1, 1], m[2, 2]) == (2.0, 3.0, 4.0)
    assert m[0, 1] == 0.0


def test_transform_rotation_keeps_translation():
    q = Quaternion(0.0, 0.0, 0.0, -1.0)
    m = Transform(position=Vector3(5.0, 0.0, 0.0), rotation=q).matrix()
    assert m[3, 0] == 5.0
    assert m[0, 0] == 1.0


def test_mesh_data_defaults():
    md = MeshData()
    assert md.material_index == 0
    assert md.mesh.vertex_format() == Vertex.FORMAT
    assert VertexElement.TANGENT in md.mesh.vertex_format()


def test_material_data_defaults():
    md = MaterialData()
    assert md.diffuse_map_name == ""
    assert md.material.power == 10.0


def test_models_do_not_share_lists():
    a, b = Model(), Model()
    a.mesh_data.append(MeshData())
    a.material_data.append(MaterialData(diffuse_map_name="wood.jpg"))
    assert b.mesh_data == [] and b.material_data == []
    assert a.material_data[0].diffuse_map_name == "wood.jpg"