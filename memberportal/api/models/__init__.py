# First-party/Local
from memberportal.api.models.generation_role import GenerationRole
from memberportal.api.models.member import Member
from memberportal.api.models.team import Team
from memberportal.api.models.team_membership import MemberTeamRelation, TeamLeader
from memberportal.api.models.user import User
