# MIT License (see LICENSE)
"""
Planning-scene record types.

Defines the collision world a planner works in:
- CollisionObject / AttachedCollisionObject: geometry in the world or
  carried by a robot link.
- AllowedCollisionMatrix: which pairs of bodies may touch.
- LinkPadding / LinkScale / ObjectColor: per-link and per-object settings.
- Octomap / OctomapWithPose / PlanningSceneWorld: the world container and
  its occupancy map.
- RobotState / PlanningScene: the aggregates.

Scene and state records carry an `is_diff` flag. When set, the record is a
sparse overlay to merge onto a previously known full record. Merging is the
consumer's job; the records only transport the flag.
"""
from __future__ import annotations
import enum
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from ..util import as_bytes, str_tuple
from .geometry import ColorRGBA, Header, Pose, TransformStamped
from .sensor import JointState, JointTrajectory, MultiDOFJointState
from .shapes import Mesh, Plane, SolidPrimitive


# =============================================================================
# Collision objects
# =============================================================================

@dataclass(frozen=True)
class ObjectType:
    """Database key of a recognized object type."""
    key: str = ""
    db: str = ""

    __msgtype__: ClassVar[str] = "object_recognition_msgs/ObjectType"


@dataclass(frozen=True)
class CollisionObject:
    """
    A named collision body made of primitives, meshes and planes.

    Each shape sequence is parallel to its pose sequence: ``primitives[i]``
    sits at ``primitive_poses[i]``, and likewise for meshes and planes.

    Attributes:
        header: Frame the poses are expressed in.
        id: Object identifier, unique within a scene.
        type: Optional recognition database type.
        operation: What to do with the object: "add", "remove", "append"
                   or "move".
    """
    header: Header = field(default_factory=Header)
    id: str = ""
    type: ObjectType = field(default_factory=ObjectType)
    primitives: tuple[SolidPrimitive, ...] = ()
    primitive_poses: tuple[Pose, ...] = ()
    meshes: tuple[Mesh, ...] = ()
    mesh_poses: tuple[Pose, ...] = ()
    planes: tuple[Plane, ...] = ()
    plane_poses: tuple[Pose, ...] = ()
    operation: str = "add"

    __msgtype__: ClassVar[str] = "moveit_msgs/CollisionObject"

    def __post_init__(self) -> None:
        for name in ("primitives", "primitive_poses", "meshes",
                     "mesh_poses", "planes", "plane_poses"):
            object.__setattr__(self, name, tuple(getattr(self, name)))


@dataclass(frozen=True)
class AttachedCollisionObject:
    """
    A collision object rigidly attached to a robot link.

    Attributes:
        link_name: Link the object is attached to.
        object: The attached geometry.
        touch_links: Links allowed to touch the object.
        detach_posture: Posture of the end effector used to release the object.
        weight: Object weight in kg (0 when unknown).
    """
    link_name: str = ""
    object: CollisionObject = field(default_factory=CollisionObject)
    touch_links: tuple[str, ...] = ()
    detach_posture: JointTrajectory = field(default_factory=JointTrajectory)
    weight: float = 0.0

    __msgtype__: ClassVar[str] = "moveit_msgs/AttachedCollisionObject"

    def __post_init__(self) -> None:
        object.__setattr__(self, "touch_links", str_tuple(self.touch_links))


# =============================================================================
# Allowed collision matrix
# =============================================================================

class Allowance(enum.Enum):
    """State of one allowed-collision cell."""
    ALLOWED = "allowed"
    NOT_ALLOWED = "not_allowed"
    UNSPECIFIED = "unspecified"


@dataclass(frozen=True)
class AllowedCollisionEntry:
    """One row of the allowed collision matrix."""
    enabled: tuple[Allowance, ...] = ()

    __msgtype__: ClassVar[str] = "moveit_msgs/AllowedCollisionEntry"

    def __post_init__(self) -> None:
        object.__setattr__(self, "enabled", tuple(self.enabled))


@dataclass(frozen=True)
class AllowedCollisionMatrix:
    """
    Square matrix of collision allowances between named bodies.

    ``entry_values[i].enabled[j]`` states whether ``entry_names[i]`` may
    collide with ``entry_names[j]``. Default entries give a fallback per
    name for pairs without a specified cell.
    """
    entry_names: tuple[str, ...] = ()
    entry_values: tuple[AllowedCollisionEntry, ...] = ()
    default_entry_names: tuple[str, ...] = ()
    default_entry_values: tuple[bool, ...] = ()

    __msgtype__: ClassVar[str] = "moveit_msgs/AllowedCollisionMatrix"

    def __post_init__(self) -> None:
        object.__setattr__(self, "entry_names", str_tuple(self.entry_names))
        object.__setattr__(self, "entry_values", tuple(self.entry_values))
        object.__setattr__(self, "default_entry_names", str_tuple(self.default_entry_names))
        object.__setattr__(self, "default_entry_values",
                           tuple(bool(v) for v in self.default_entry_values))

    def get_entry(self, name_a: str, name_b: str) -> Allowance:
        """
        Look up whether two bodies may collide.

        The matrix cell is used when both names are entries and the cell is
        specified; otherwise the default entry of `name_a`, then of `name_b`.
        """
        names = self.entry_names
        if name_a in names and name_b in names:
            cell = self.entry_values[names.index(name_a)].enabled[names.index(name_b)]
            if cell is not Allowance.UNSPECIFIED:
                return cell
        for name in (name_a, name_b):
            if name in self.default_entry_names:
                allowed = self.default_entry_values[self.default_entry_names.index(name)]
                return Allowance.ALLOWED if allowed else Allowance.NOT_ALLOWED
        return Allowance.UNSPECIFIED


# =============================================================================
# Per-link and per-object settings
# =============================================================================

@dataclass(frozen=True)
class LinkPadding:
    link_name: str = ""
    padding: float = 0.0

    __msgtype__: ClassVar[str] = "moveit_msgs/LinkPadding"


@dataclass(frozen=True)
class LinkScale:
    link_name: str = ""
    scale: float = 0.0

    __msgtype__: ClassVar[str] = "moveit_msgs/LinkScale"


@dataclass(frozen=True)
class ObjectColor:
    id: str = ""
    color: ColorRGBA = field(default_factory=ColorRGBA)

    __msgtype__: ClassVar[str] = "moveit_msgs/ObjectColor"


# =============================================================================
# World
# =============================================================================

@dataclass(frozen=True)
class Octomap:
    """
    Serialized octree occupancy map.

    Attributes:
        header: Frame and stamp of the map.
        binary: True if `data` holds a binary (occupied/free only) octree,
                False for a full probabilistic one.
        id: Octree class name, e.g. "OcTree".
        resolution: Leaf voxel edge length in meters.
        data: Serialized octree. Opaque to this package.
    """
    header: Header = field(default_factory=Header)
    binary: bool = False
    id: str = ""
    resolution: float = 0.0
    data: bytes = b""

    __msgtype__: ClassVar[str] = "octomap_msgs/Octomap"

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", as_bytes(self.data))


@dataclass(frozen=True)
class OctomapWithPose:
    """An octomap placed at `origin` in `header.frame_id`."""
    header: Header = field(default_factory=Header)
    origin: Pose = field(default_factory=Pose)
    octomap: Octomap = field(default_factory=Octomap)

    __msgtype__: ClassVar[str] = "octomap_msgs/OctomapWithPose"


@dataclass(frozen=True)
class PlanningSceneWorld:
    """Collision objects not attached to the robot, plus an optional occupancy map."""
    collision_objects: tuple[CollisionObject, ...] = ()
    octomap: Optional[OctomapWithPose] = None

    __msgtype__: ClassVar[str] = "moveit_msgs/PlanningSceneWorld"

    def __post_init__(self) -> None:
        object.__setattr__(self, "collision_objects", tuple(self.collision_objects))


# =============================================================================
# Aggregates
# =============================================================================

@dataclass(frozen=True)
class RobotState:
    """Full (or, with `is_diff`, partial) state of a robot."""
    joint_state: JointState = field(default_factory=JointState)
    multi_dof_joint_state: MultiDOFJointState = field(default_factory=MultiDOFJointState)
    attached_collision_objects: tuple[AttachedCollisionObject, ...] = ()
    is_diff: bool = False

    __msgtype__: ClassVar[str] = "moveit_msgs/RobotState"

    def __post_init__(self) -> None:
        object.__setattr__(self, "attached_collision_objects",
                           tuple(self.attached_collision_objects))


@dataclass(frozen=True)
class PlanningScene:
    """
    Everything a planner needs to know about the robot and its surroundings.

    Attributes:
        name: Scene name.
        robot_state: Current robot state, including attached objects.
        robot_model_name: Name of the robot model the scene was built for.
        fixed_frame_transforms: Transforms between fixed frames.
        allowed_collision_matrix: Pairs of bodies allowed to collide.
        link_padding: Per-link padding in meters, in document order.
        link_scale: Per-link scaling, in document order.
        object_colors: Per-object colors, in document order.
        world: Collision objects and occupancy map.
        is_diff: True if this scene is an overlay on a known full scene.

    Note:
        The per-link and per-object lists keep duplicates. The `*_map()`
        helpers resolve them with the last occurrence winning.
    """
    name: str = ""
    robot_state: RobotState = field(default_factory=RobotState)
    robot_model_name: str = ""
    fixed_frame_transforms: tuple[TransformStamped, ...] = ()
    allowed_collision_matrix: AllowedCollisionMatrix = field(default_factory=AllowedCollisionMatrix)
    link_padding: tuple[LinkPadding, ...] = ()
    link_scale: tuple[LinkScale, ...] = ()
    object_colors: tuple[ObjectColor, ...] = ()
    world: PlanningSceneWorld = field(default_factory=PlanningSceneWorld)
    is_diff: bool = False

    __msgtype__: ClassVar[str] = "moveit_msgs/PlanningScene"

    def __post_init__(self) -> None:
        for name in ("fixed_frame_transforms", "link_padding", "link_scale", "object_colors"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def link_padding_map(self) -> dict[str, float]:
        return {p.link_name: p.padding for p in self.link_padding}

    def link_scale_map(self) -> dict[str, float]:
        return {s.link_name: s.scale for s in self.link_scale}

    def object_color_map(self) -> dict[str, ColorRGBA]:
        return {c.id: c.color for c in self.object_colors}
