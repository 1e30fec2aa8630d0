"""
Core metamodels and model builders for the robot language.

This module provides the main entry points for building and validating
robot-language models. Duplicate checks live in the validation/ package,
resolution passes in resolution/, and textX-to-model conversion in
processors/.
"""

from os.path import join, dirname, abspath
from pathlib import Path
from textx import metamodel_from_file

from rlc_dsl.log import get_logger
from rlc_dsl.processors import add_skillset_elements, build_rlc_model
from rlc_dsl.skillset.model import SkillsetModel

logger = get_logger(__name__)


# ------------------------------------------------------------------------------
# Constants
THIS_DIR = dirname(abspath(__file__))
GRAMMAR_DIR = join(THIS_DIR, "grammar")
RLC_GRAMMAR = join(GRAMMAR_DIR, "rlc.tx")
SKILLSET_GRAMMAR = join(GRAMMAR_DIR, "skillset.tx")


# ------------------------------------------------------------------------------
# Metamodel creation

def get_metamodel(debug: bool = False):
    """Load the textX metamodel for robot-language programs from grammar/rlc.tx."""
    return metamodel_from_file(RLC_GRAMMAR, autokwd=True, debug=debug)


def get_skillset_metamodel(debug: bool = False):
    """Load the textX metamodel for included skillset files from grammar/skillset.tx."""
    return metamodel_from_file(SKILLSET_GRAMMAR, autokwd=True, debug=debug)


# Global metamodel instances
RlcMetaModel = get_metamodel(debug=False)
SkillsetMetaModel = get_skillset_metamodel(debug=False)


# ------------------------------------------------------------------------------
# Skillset files

def load_skillset_file(path, imported_model: SkillsetModel = None) -> SkillsetModel:
    """Parse a skillset file and append its declarations to `imported_model`."""
    if imported_model is None:
        imported_model = SkillsetModel()
    tx_model = SkillsetMetaModel.model_from_file(str(path))
    return add_skillset_elements(tx_model, imported_model)


def load_skillset_str(text: str, imported_model: SkillsetModel = None) -> SkillsetModel:
    if imported_model is None:
        imported_model = SkillsetModel()
    tx_model = SkillsetMetaModel.model_from_str(text)
    return add_skillset_elements(tx_model, imported_model)


def load_includes(model, base_dir) -> None:
    """
    Load every included skillset file into the model's imported model.

    Each distinct file is loaded once; repeated includes stay in
    `model.includes` so the duplicate check can report them.
    """
    base_dir = Path(base_dir)
    visited = set()

    for include in model.includes:
        include_path = (base_dir / include).resolve()
        if include_path in visited:
            continue
        visited.add(include_path)

        if not include_path.exists():
            raise FileNotFoundError(f"Include not found: {include_path}")

        logger.info(f"[INCLUDE] Loading {include_path.name}")
        load_skillset_file(include_path, model.imported_model)


# ------------------------------------------------------------------------------
# Public model builders

def parse_model(model_path: str, imported_model: SkillsetModel = None):
    """Parse a program file and load its includes, without validating or resolving."""
    model_file = Path(model_path).resolve()
    if not model_file.exists():
        raise FileNotFoundError(f"File not found: {model_file}")

    tx_model = RlcMetaModel.model_from_file(str(model_file))
    model = build_rlc_model(tx_model, imported_model)
    load_includes(model, model_file.parent)
    return model


def parse_model_str(model_str: str, base_dir=None, imported_model: SkillsetModel = None):
    """Parse a program from a string; includes are looked up relative to `base_dir` (default: cwd)."""
    tx_model = RlcMetaModel.model_from_str(model_str)
    model = build_rlc_model(tx_model, imported_model)
    load_includes(model, base_dir if base_dir is not None else Path.cwd())
    return model


def check_model(model):
    """Run the duplicate check and both resolution passes on a parsed model."""
    model.duplicate()
    model.resolve()
    return model


def build_model(model_path: str, imported_model: SkillsetModel = None):
    """Parse, validate and resolve a model from a file path."""
    return check_model(parse_model(model_path, imported_model))


def build_model_str(model_str: str, base_dir=None, imported_model: SkillsetModel = None):
    """Parse, validate and resolve a model from a string."""
    return check_model(parse_model_str(model_str, base_dir, imported_model))
