import os
import logging
from pathlib import Path
from typing import Dict, Optional
import yaml
from blinker import Signal
from platformdirs import user_config_dir
from .core.policy import PathPolicy, PRESETS

logger = logging.getLogger(__name__)


CONFIG_DIR = Path(user_config_dir("pathnorm"))
POLICY_DIR = CONFIG_DIR / "policies"


def getflag(name, default=False):
    default = "true" if default else "false"
    return os.environ.get(name, default).lower() in ("true", "1")


class PolicyManager:
    """
    Keeps named path policies: the built-in presets plus any profiles
    stored as YAML files in `base_dir` (if given), one policy per file,
    e.g.

        # plotter.yaml
        absolute_only: true
        no_ortho_shorthand: true
        arc_as_cubic: true

    The file stem is the policy name. User profiles shadow presets of the
    same name.
    """

    def __init__(self, base_dir: Optional[Path] = None):
        if base_dir is not None:
            base_dir.mkdir(parents=True, exist_ok=True)
        self.base_dir = base_dir
        self.policies: Dict[str, PathPolicy] = dict(PRESETS)
        self.changed = Signal()
        if base_dir is not None:
            self.load()

    def filename_from_name(self, name: str) -> Path:
        if self.base_dir is None:
            raise ValueError("PolicyManager has no directory")
        return self.base_dir / f"{name}.yaml"

    def add(self, policy: PathPolicy) -> None:
        if not policy.name:
            raise ValueError("only named policies can be managed")
        if self.policies.get(policy.name) == policy:
            return
        self.policies[policy.name] = policy
        self.changed.send(self, policy=policy)

    def get(self, name: str) -> PathPolicy:
        try:
            return self.policies[name]
        except KeyError:
            raise KeyError(f"Unknown path policy: {name}") from None

    def names(self):
        return sorted(self.policies)

    def save(self, policy: PathPolicy) -> None:
        self.add(policy)
        data = policy.to_dict()
        data.pop("name", None)
        with open(self.filename_from_name(policy.name), "w") as f:
            yaml.safe_dump(data, f)

    def load_policy(self, name: str) -> Optional[PathPolicy]:
        policy_file = self.filename_from_name(name)
        if not policy_file.exists():
            raise FileNotFoundError(f"Policy file {policy_file} not found")
        with open(policy_file, "r") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.warning(f"skipping malformed policy file {f.name}: {e}")
                return None
            if not isinstance(data, dict):
                logger.warning(f"skipping invalid policy file {f.name}")
                return None
        data["name"] = name
        policy = PathPolicy.from_dict(data)
        self.add(policy)
        return policy

    def load(self) -> Dict[str, PathPolicy]:
        loaded = dict()
        for file in sorted(self.base_dir.glob("*.yaml")):
            policy = self.load_policy(file.stem)
            if policy:
                loaded[policy.name] = policy
        logger.info(f"Loaded {len(loaded)} policies from {self.base_dir}")
        return loaded


# Initialized lazily so that importing the package has no side effects
# on the file system.
policy_mgr: Optional[PolicyManager] = None


def initialize_managers(base_dir: Optional[Path] = None) -> PolicyManager:
    """
    Creates the global PolicyManager. Safe to call multiple times. Set
    PATHNORM_NO_USER_POLICIES=1 to skip the user's configuration directory,
    e.g. in test runs.
    """
    global policy_mgr

    if policy_mgr is not None:
        return policy_mgr

    if base_dir is None:
        if getflag("PATHNORM_NO_USER_POLICIES"):
            logger.info("User policies disabled by environment")
        else:
            base_dir = POLICY_DIR
            logger.info(f"Initializing policies from {base_dir}")
    policy_mgr = PolicyManager(base_dir)
    return policy_mgr


def get_policy(name: str) -> PathPolicy:
    return initialize_managers().get(name)
