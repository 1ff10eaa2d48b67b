"""Labels the pull request validations look for."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Label:
    name: str
    description: str


ACTION_MERGE = Label(
    name="action: merge",
    description="The PR is ready for merge by the caretaker",
)
DETECTED_BREAKING_CHANGE = Label(
    name="detected: breaking change",
    description="PR contains a commit with a breaking change",
)
MERGE_FIX_COMMIT_MESSAGE = Label(
    name="merge: fix commit message",
    description="When the PR is merged, rewrites/fixups of the commit messages are needed",
)
REQUIRES_TGP = Label(
    name="requires: TGP",
    description="This PR requires a passing TGP before merging is allowed",
)

TARGET_MAJOR = Label(
    name="target: major",
    description="This PR is targeted for the next major release",
)
TARGET_MINOR = Label(
    name="target: minor",
    description="This PR is targeted for the next minor release",
)
TARGET_PATCH = Label(
    name="target: patch",
    description="This PR is targeted for the next patch release",
)
TARGET_RC = Label(
    name="target: rc",
    description="This PR is targeted for the next release-candidate",
)
TARGET_LTS = Label(
    name="target: lts",
    description="This PR is targeting a version currently in long-term support",
)
