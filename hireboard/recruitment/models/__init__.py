from .stage import Stage  # noqa
from .setting import RecruitmentSetting  # noqa
from .template import Template  # noqa
from .candidate import Candidate, CandidateHistory, CandidateComment, TestResult  # noqa
