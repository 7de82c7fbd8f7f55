# MIT License (see LICENSE)
"""
Immutable record types of the robot world model.

Submodules:
    - geometry: Time, Header, vectors, poses, transforms.
    - sensor: Joint states and joint trajectories.
    - shapes: Solid primitives, meshes, planes.
    - scene: Collision objects, collision matrix, world, planning scene.
"""
from .geometry import (
    ColorRGBA,
    Duration,
    Header,
    Point,
    Pose,
    Quaternion,
    Time,
    Transform,
    TransformStamped,
    Twist,
    Vector3,
    Wrench,
)
from .sensor import (
    JointState,
    JointTrajectory,
    JointTrajectoryPoint,
    MultiDOFJointState,
)
from .shapes import Mesh, MeshTriangle, Plane, SolidPrimitive
from .scene import (
    AllowedCollisionEntry,
    AllowedCollisionMatrix,
    Allowance,
    AttachedCollisionObject,
    CollisionObject,
    LinkPadding,
    LinkScale,
    ObjectColor,
    ObjectType,
    Octomap,
    OctomapWithPose,
    PlanningScene,
    PlanningSceneWorld,
    RobotState,
)

__all__ = [
    # Geometry
    "Time",
    "Duration",
    "Header",
    "Vector3",
    "Point",
    "Quaternion",
    "ColorRGBA",
    "Pose",
    "Transform",
    "TransformStamped",
    "Twist",
    "Wrench",
    # Joint space
    "JointState",
    "MultiDOFJointState",
    "JointTrajectoryPoint",
    "JointTrajectory",
    # Shapes
    "SolidPrimitive",
    "MeshTriangle",
    "Mesh",
    "Plane",
    # Scene
    "ObjectType",
    "CollisionObject",
    "AttachedCollisionObject",
    "Allowance",
    "AllowedCollisionEntry",
    "AllowedCollisionMatrix",
    "LinkPadding",
    "LinkScale",
    "ObjectColor",
    "Octomap",
    "OctomapWithPose",
    "PlanningSceneWorld",
    "RobotState",
    "PlanningScene",
]
