from folio.db.models.admin import Admin
from folio.db.models.category import ProjectCategory
from folio.db.models.client import CategoryImage, Client, ClientCategory
from folio.db.models.experience import Experience
from folio.db.models.hero_slide import HeroSlide
from folio.db.models.message import Message
from folio.db.models.profile import Education, Profile
from folio.db.models.project import Project, ProjectImage, ProjectLike
from folio.db.models.service import Service
from folio.db.models.site_settings import SiteSettings
from folio.db.models.skill import Skill, SkillCategory

__all__ = ["Admin", "CategoryImage", "Client", "ClientCategory", "Education", "Experience", "HeroSlide", "Message", "Profile", "Project", "ProjectCategory", "ProjectImage", "ProjectLike", "Service", "SiteSettings", "Skill", "SkillCategory"]
