from folio.controllers.categories import CategoryController
from folio.controllers.clients import ClientController
from folio.controllers.dashboard import DashboardController
from folio.controllers.experiences import ExperienceController
from folio.controllers.health import HealthController
from folio.controllers.hero_slides import HeroSlideController
from folio.controllers.messages import MessageController
from folio.controllers.profile import ProfileController
from folio.controllers.projects import ProjectController
from folio.controllers.services import ServiceController
from folio.controllers.settings import SettingsController
from folio.controllers.skills import SkillController
from folio.controllers.upload import UploadController

API_CONTROLLERS = [
    CategoryController,
    ClientController,
    DashboardController,
    ExperienceController,
    HealthController,
    HeroSlideController,
    MessageController,
    ProfileController,
    ProjectController,
    ServiceController,
    SettingsController,
    SkillController,
    UploadController,
]

__all__ = ["API_CONTROLLERS"]
