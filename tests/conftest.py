"""
Pytest configuration and shared fixtures for the robot-language test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path

from rlc_dsl.language import build_model, get_metamodel
from rlc_dsl.model import (
    DeclMethod,
    Function,
    Model,
    Parameter,
    Position,
    Robot,
    RlcType,
    Unresolved,
)
from rlc_dsl.skillset import DataType, Skillset, SkillsetModel


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for model files."""
    temp_dir = tempfile.mkdtemp(prefix="rlc_test_")
    yield Path(temp_dir)
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(scope="session")
def rlc_metamodel():
    """Return the robot-language metamodel (cached for session)."""
    return get_metamodel()


@pytest.fixture
def write_rlc_file(temp_output_dir):
    """Factory fixture to write robot-language or skillset content to a temporary file."""
    def _write(content: str, filename: str = "test.rlc") -> Path:
        file_path = temp_output_dir / filename
        file_path.write_text(content)
        return file_path
    return _write


@pytest.fixture
def build_rlc_model(write_rlc_file):
    """Factory fixture to build a model from robot-language content."""
    def _build(content: str, filename: str = "test.rlc"):
        file_path = write_rlc_file(content, filename)
        return build_model(str(file_path))
    return _build


# Model construction helpers

def pos(line, column=1, file="test.rlc"):
    return Position(file, line, column)


def param(name, type_name, line=1):
    return Parameter(name, Unresolved(type_name, pos(line, 5)), pos(line, 3))


@pytest.fixture
def make_position():
    return pos


@pytest.fixture
def make_param():
    return param


@pytest.fixture
def imported_model():
    """Imported model exporting skillset 'Arm' (skills grasp/release) and type 'Float'."""
    imported = SkillsetModel()
    imported.add_skillset(Skillset("Arm", ["grasp", "release"]))
    imported.add_type(DataType("Float"))
    return imported


@pytest.fixture
def gripper_model():
    """One robot, one local type and a function taking that type, nothing resolved yet."""
    model = Model()
    model.add_robot(Robot("Arm1", pos(1)))
    model.add_type(RlcType("Gripper", pos(2)))
    model.add_function(Function("f", [param("g", "Gripper", line=4)], position=pos(4)))
    model.add_declared_method(DeclMethod("grasp", [param("g", "Gripper", line=6)], pos(6)))
    return model


@pytest.fixture
def arm_program():
    """Robot-language program that uses every construct, plus its skillset file."""
    skillset = """
// exported by the arm vendor
type Float
skillset Arm {
    skill grasp
    skill release
}
"""
    program = """
include "arm.rl"

robot Arm1
type Gripper

fn move(arm: Arm, speed: Float, g: Gripper, fast: bool) {
    publish("/cmd_vel", speed);
    stop(arm);
    subscribe("/joint_states");
    publish("/cmd_vel", 1.5)
}

fn stop(arm: Arm) {
    publish("/stop", true)
}

method grasp(g: Gripper, force: Float)
"""
    return program, skillset
