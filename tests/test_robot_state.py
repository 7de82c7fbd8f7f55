import numpy as np
import pytest
from scene_codec.errors import ErrorKind, FormatError
from scene_codec.msgs import (
    Duration,
    Header,
    JointState,
    JointTrajectory,
    JointTrajectoryPoint,
    MultiDOFJointState,
    Quaternion,
    Transform,
    Vector3,
)
from scene_codec.io.robot_state import (
    joint_state_from_yaml,
    joint_state_to_yaml,
    joint_trajectory_from_yaml,
    joint_trajectory_point_from_yaml,
    joint_trajectory_to_yaml,
    multi_dof_joint_state_from_yaml,
    multi_dof_joint_state_to_yaml,
)


def test_joint_state_absent_arrays_are_empty():
    js = joint_state_from_yaml({"name": ["shoulder", "elbow"]})
    assert js.name == ("shoulder", "elbow")
    assert js.position == ()
    assert js.velocity == ()
    assert js.effort == ()


def test_joint_state_encoding_omits_empty_arrays():
    js = JointState(name=["a", "b"], position=[0.1, 0.2])
    node = joint_state_to_yaml(js)
    assert node == {"name": ["a", "b"], "position": [0.1, 0.2]}
    assert joint_state_from_yaml(node) == js


def test_joint_state_always_writes_names():
    assert joint_state_to_yaml(JointState()) == {"name": []}


@pytest.mark.parametrize("array", ["position", "velocity", "effort"])
def test_joint_state_length_mismatch(array):
    """Any value array whose length differs from the names is rejected by name."""
    node = {"name": ["a", "b", "c"], array: [0.0, 1.0]}
    with pytest.raises(FormatError) as exc:
        joint_state_from_yaml(node)
    assert exc.value.kind is ErrorKind.ARITY_MISMATCH
    assert exc.value.path == ("JointState", array)
    assert array in str(exc.value)


def test_joint_state_present_empty_array_is_a_mismatch():
    with pytest.raises(FormatError) as exc:
        joint_state_from_yaml({"name": ["a"], "position": []})
    assert exc.value.kind is ErrorKind.ARITY_MISMATCH


def test_joint_state_values_without_names():
    with pytest.raises(FormatError) as exc:
        joint_state_from_yaml({"position": [0.0]})
    assert exc.value.kind is ErrorKind.ARITY_MISMATCH


def test_joint_state_accepts_numpy_arrays():
    """Planner output given as numpy arrays is stored as plain floats."""
    js = JointState(name=["j1", "j2"], position=np.array([0.5, -0.5]))
    assert js.position == (0.5, -0.5)
    assert all(type(v) is float for v in js.position)
    assert joint_state_to_yaml(js)["position"] == [0.5, -0.5]


def test_joint_state_header_round_trip():
    js = JointState(header=Header(seq=7, frame_id="base"), name=["j"], effort=[1.0])
    assert joint_state_from_yaml(joint_state_to_yaml(js)) == js


def test_multi_dof_joint_state():
    tf = Transform(Vector3(1, 2, 0), Quaternion(0, 0, 0, 1))
    js = MultiDOFJointState(joint_names=["base"], transforms=[tf])
    node = multi_dof_joint_state_to_yaml(js)
    assert node == {
        "joint_names": ["base"],
        "transforms": [{"translation": [1.0, 2.0, 0.0], "rotation": [0.0, 0.0, 0.0, 1.0]}],
    }
    assert multi_dof_joint_state_from_yaml(node) == js


def test_multi_dof_joint_state_length_mismatch():
    node = {
        "joint_names": ["base", "arm"],
        "twist": [{"linear": [0, 0, 0], "angular": [0, 0, 0]}],
    }
    with pytest.raises(FormatError) as exc:
        multi_dof_joint_state_from_yaml(node)
    assert exc.value.kind is ErrorKind.ARITY_MISMATCH
    assert exc.value.path == ("MultiDOFJointState", "twist")


def test_joint_trajectory_round_trip():
    traj = JointTrajectory(
        joint_names=["j1", "j2"],
        points=[
            JointTrajectoryPoint(positions=[0.0, 0.0], time_from_start=Duration(0, 0)),
            JointTrajectoryPoint(
                positions=[0.5, 1.0], velocities=[0.0, 0.0], time_from_start=Duration(1, 500000000)
            ),
        ],
    )
    node = joint_trajectory_to_yaml(traj)
    assert node["points"][1] == {
        "positions": [0.5, 1.0],
        "velocities": [0.0, 0.0],
        "time_from_start": 1.5,
    }
    assert joint_trajectory_from_yaml(node) == traj


def test_joint_trajectory_point_arity_checked_against_trajectory():
    node = {
        "joint_names": ["j1", "j2"],
        "points": [{"positions": [0.0, 0.0]}, {"positions": [1.0]}],
    }
    with pytest.raises(FormatError) as exc:
        joint_trajectory_from_yaml(node)
    assert exc.value.kind is ErrorKind.ARITY_MISMATCH
    assert exc.value.path == ("JointTrajectory", "points", 1, "positions")


def test_standalone_point_has_no_arity_check():
    p = joint_trajectory_point_from_yaml({"positions": [1.0], "effort": [1.0, 2.0]})
    assert p.positions == (1.0,)
    assert p.time_from_start == Duration()


def test_trajectory_point_with_infinite_time():
    with pytest.raises(FormatError) as exc:
        joint_trajectory_point_from_yaml({"positions": [0.0], "time_from_start": float("inf")})
    assert exc.value.kind is ErrorKind.TYPE_MISMATCH
    assert exc.value.path == ("JointTrajectoryPoint", "time_from_start")
