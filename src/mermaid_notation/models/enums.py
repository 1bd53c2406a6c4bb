# src/mermaid_notation/models/enums.py
from __future__ import annotations

from enum import Enum

# ---------- engine configuration ----------

class MermaidTheme(str, Enum):
    DEFAULT = "default"
    DARK = "dark"
    FOREST = "forest"
    NEUTRAL = "neutral"
    BASE = "base"

class SecurityLevel(str, Enum):
    STRICT = "strict"
    LOOSE = "loose"
    ANTISCRIPT = "antiscript"
    SANDBOX = "sandbox"

class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"

class FlowchartCurve(str, Enum):
    BASIS = "basis"
    LINEAR = "linear"
    CARDINAL = "cardinal"

# ---------- flowchart / block ----------

class FlowchartDirection(str, Enum):
    TOP_DOWN = "TD"
    TOP_BOTTOM = "TB"
    BOTTOM_TOP = "BT"
    RIGHT_LEFT = "RL"
    LEFT_RIGHT = "LR"

class NodeShape(str, Enum):
    RECTANGLE = "rectangle"
    ROUNDED = "rounded"
    STADIUM = "stadium"
    SUBROUTINE = "subroutine"
    CYLINDRICAL = "cylindrical"
    CIRCLE = "circle"
    RHOMBUS = "rhombus"
    HEXAGON = "hexagon"
    PARALLELOGRAM = "parallelogram"
    TRAPEZOID = "trapezoid"

class ConnectionType(str, Enum):
    SOLID = "solid"
    ARROW = "arrow"
    OPEN = "open"
    DOTTED = "dotted"
    THICK = "thick"

# ---------- sequence ----------

class ParticipantType(str, Enum):
    PARTICIPANT = "participant"
    ACTOR = "actor"
    DATABASE = "database"

class InteractionType(str, Enum):
    SOLID = "solid"
    DOTTED = "dotted"
    ASYNC = "async"

class NotePosition(str, Enum):
    LEFT_OF = "left of"
    RIGHT_OF = "right of"
    OVER = "over"

# ---------- class / state / ER ----------

class ClassVisibility(str, Enum):
    PUBLIC = "+"
    PRIVATE = "-"
    PROTECTED = "#"
    PACKAGE = "~"

class ClassRelationType(str, Enum):
    INHERITANCE = "inheritance"
    COMPOSITION = "composition"
    AGGREGATION = "aggregation"
    ASSOCIATION = "association"
    REALIZATION = "realization"
    DEPENDENCY = "dependency"
    LINK = "link"

class StateType(str, Enum):
    NORMAL = "normal"
    CHOICE = "choice"
    FORK = "fork"
    JOIN = "join"
    COMPOSITE = "composite"

class ERRelationType(str, Enum):
    ONE_TO_ONE = "one-to-one"
    ONE_TO_MANY = "one-to-many"
    MANY_TO_ONE = "many-to-one"
    MANY_TO_MANY = "many-to-many"

class ERConstraint(str, Enum):
    PRIMARY_KEY = "PK"
    FOREIGN_KEY = "FK"
    UNIQUE_KEY = "UK"
    NOT_NULL = "NOT NULL"
    AUTO_INCREMENT = "AUTO_INCREMENT"

class CommitType(str, Enum):
    NORMAL = "normal"
    REVERSE = "reverse"
    HIGHLIGHT = "highlight"

# ---------- project management ----------

class GanttTaskStatus(str, Enum):
    DONE = "done"
    ACTIVE = "active"
    CRITICAL = "crit"
    MILESTONE = "milestone"

class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

class JourneyRating(int, Enum):
    VERY_BAD = 1
    BAD = 2
    NEUTRAL = 3
    GOOD = 4
    VERY_GOOD = 5

# ---------- technical ----------

class ServiceType(str, Enum):
    INTERNET = "internet"
    SERVER = "server"
    DATABASE = "database"
    DISK = "disk"
    QUEUE = "queue"
    FUNCTION = "function"
    CLOUD = "cloud"

class GroupType(str, Enum):
    CLOUD = "cloud"
    DATABASE = "database"
    SERVER = "server"
    CLIENT = "client"

class Direction(str, Enum):
    LEFT = "L"
    RIGHT = "R"
    TOP = "T"
    BOTTOM = "B"

# ---------- business analysis ----------

class MindMapShape(str, Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    HEXAGON = "hexagon"
    CLOUD = "cloud"

class QuadrantNumber(int, Enum):
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4

class ChartType(str, Enum):
    LINE = "line"
    BAR = "bar"
    SCATTER = "scatter"

class AxisType(str, Enum):
    CATEGORY = "category"
    VALUE = "value"
    TIME = "time"

class RequirementType(str, Enum):
    FUNCTIONAL = "functional"
    PERFORMANCE = "performance"
    INTERFACE = "interface"
    DESIGN = "design"

class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class VerifyMethod(str, Enum):
    TEST = "test"
    ANALYSIS = "analysis"
    INSPECTION = "inspection"
    DEMONSTRATION = "demonstration"

class ElementType(str, Enum):
    MODULE = "module"
    COMPONENT = "component"
    SYSTEM = "system"
    INTERFACE = "interface"

class RequirementRelationType(str, Enum):
    SATISFIES = "satisfies"
    DERIVES = "derives"
    REFINES = "refines"
    TRACES = "traces"
    CONTAINS = "contains"
    COPIES = "copies"
    VERIFIES = "verifies"
