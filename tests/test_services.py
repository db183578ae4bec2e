"""Tests for the resource service modules against an in-memory database."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from folio.db.models import ProjectImage, ProjectLike, SkillCategory
from folio.db.services import (
    admin_service,
    category_service,
    client_service,
    dashboard_service,
    experience_service,
    hero_slide_service,
    message_service,
    profile_service,
    project_service,
    settings_service,
    skill_service,
)
from folio.lib.exceptions import ConflictError, InvalidRequestError, NotFoundError


def _project_fields(title: str, **extra) -> dict:
    return {
        "title": title,
        "project_date": datetime(2024, 5, 1, tzinfo=timezone.utc),
        "summary": f"{title} summary",
        "thumbnail_url": "https://cdn.example.com/thumb.png",
        **extra,
    }


def _slide_fields(title: str) -> dict:
    return {
        "title": title,
        "left_title": "Left",
        "left_subtitle": "Left sub",
        "right_title": "Right",
        "right_subtitle": "Right sub",
    }


class TestCategoryService:
    """Tests for project categories."""

    @pytest.mark.asyncio
    async def test_create_derives_slug_and_appends(self, db_session):
        first = await category_service.create_category(db_session, "Brand Identity")
        second = await category_service.create_category(db_session, "  Motion & 3D ")

        assert first.slug == "brand-identity"
        assert second.slug == "motion-3d"
        assert (first.order, second.order) == (1, 2)

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, db_session):
        await category_service.create_category(db_session, "Print")
        with pytest.raises(ConflictError):
            await category_service.create_category(db_session, "Print")

    @pytest.mark.asyncio
    async def test_list_includes_project_count(self, db_session):
        branding = await category_service.create_category(db_session, "Branding")
        await category_service.create_category(db_session, "Web")
        await project_service.create_project(
            db_session, _project_fields("Logo refresh", category_id=branding.id)
        )

        listed = await category_service.list_categories(db_session)
        assert [(c.name, count) for c, count in listed] == [("Branding", 1), ("Web", 0)]

    @pytest.mark.asyncio
    async def test_delete_in_use_category_conflicts(self, db_session):
        branding = await category_service.create_category(db_session, "Branding")
        await project_service.create_project(
            db_session, _project_fields("Logo refresh", category_id=branding.id)
        )

        with pytest.raises(ConflictError):
            await category_service.delete_category(db_session, branding.id)

    @pytest.mark.asyncio
    async def test_update_missing_category(self, db_session):
        with pytest.raises(NotFoundError):
            await category_service.update_category(db_session, uuid4(), "Anything")


class TestClientService:
    """Tests for clients, client categories and category images."""

    @pytest.mark.asyncio
    async def test_slug_conflict(self, db_session):
        await client_service.create_client(db_session, {"name": "Acme", "slug": "acme"})
        with pytest.raises(ConflictError):
            await client_service.create_client(db_session, {"name": "Acme 2", "slug": "acme"})

    @pytest.mark.asyncio
    async def test_explicit_order_is_kept(self, db_session):
        client = await client_service.create_client(
            db_session, {"name": "Acme", "slug": "acme", "order": 9}
        )
        assert client.order == 9

    @pytest.mark.asyncio
    async def test_hidden_client_not_found_by_slug(self, db_session):
        client = await client_service.create_client(db_session, {"name": "Acme", "slug": "acme"})
        await client_service.toggle_client_visibility(db_session, client.id)

        with pytest.raises(NotFoundError):
            await client_service.get_client_by_slug(db_session, "acme")
        assert await client_service.list_clients(db_session, visible_only=True) == []

    @pytest.mark.asyncio
    async def test_category_slug_is_unique_per_client(self, db_session):
        acme = await client_service.create_client(db_session, {"name": "Acme", "slug": "acme"})
        globex = await client_service.create_client(db_session, {"name": "Globex", "slug": "globex"})

        await client_service.create_client_category(db_session, acme.id, "Print", "print")
        await client_service.create_client_category(db_session, globex.id, "Print", "print")
        with pytest.raises(ConflictError):
            await client_service.create_client_category(db_session, acme.id, "Print 2", "print")

    @pytest.mark.asyncio
    async def test_categories_and_images_append_per_partition(self, db_session):
        acme = await client_service.create_client(db_session, {"name": "Acme", "slug": "acme"})
        print_ = await client_service.create_client_category(db_session, acme.id, "Print", "print")
        web = await client_service.create_client_category(db_session, acme.id, "Web", "web")
        assert (print_.order, web.order) == (1, 2)

        first = await client_service.add_category_image(db_session, print_.id, "https://x/1.png")
        second = await client_service.add_category_image(db_session, print_.id, "https://x/2.png")
        other = await client_service.add_category_image(db_session, web.id, "https://x/3.png")
        assert (first.order, second.order, other.order) == (1, 2, 1)

    @pytest.mark.asyncio
    async def test_reorder_category_images_returns_new_order(self, db_session):
        acme = await client_service.create_client(db_session, {"name": "Acme", "slug": "acme"})
        print_ = await client_service.create_client_category(db_session, acme.id, "Print", "print")
        first = await client_service.add_category_image(db_session, print_.id, "https://x/1.png")
        second = await client_service.add_category_image(db_session, print_.id, "https://x/2.png")

        images = await client_service.reorder_category_images(db_session, print_.id, [second.id, first.id])

        assert [i.id for i in images] == [second.id, first.id]
        assert [i.order for i in images] == [1, 2]

    @pytest.mark.asyncio
    async def test_remove_images_ignores_other_categories(self, db_session):
        acme = await client_service.create_client(db_session, {"name": "Acme", "slug": "acme"})
        print_ = await client_service.create_client_category(db_session, acme.id, "Print", "print")
        web = await client_service.create_client_category(db_session, acme.id, "Web", "web")
        mine = await client_service.add_category_image(db_session, print_.id, "https://x/1.png")
        theirs = await client_service.add_category_image(db_session, web.id, "https://x/2.png")

        removed = await client_service.remove_category_images(db_session, print_.id, [mine.id, theirs.id])

        assert removed == 1
        assert [i.id for i in await client_service.list_category_images(db_session, web.id)] == [theirs.id]

    @pytest.mark.asyncio
    async def test_delete_client_cascades(self, db_session):
        acme = await client_service.create_client(db_session, {"name": "Acme", "slug": "acme"})
        print_ = await client_service.create_client_category(db_session, acme.id, "Print", "print")
        await client_service.add_category_image(db_session, print_.id, "https://x/1.png")

        await client_service.delete_client(db_session, acme.id)

        assert await client_service.list_all_client_categories(db_session) == []
        assert await client_service.list_category_images(db_session, print_.id) == []

    @pytest.mark.asyncio
    async def test_delete_client_category_removes_images_added_in_same_session(self, db_session):
        acme = await client_service.create_client(db_session, {"name": "Acme", "slug": "acme"})
        web = await client_service.create_client_category(db_session, acme.id, "Web", "web")
        await client_service.add_category_image(db_session, web.id, "https://x/1.png")
        await client_service.add_category_image(db_session, web.id, "https://x/2.png")

        await client_service.delete_client_category(db_session, web.id)

        assert await client_service.list_category_images(db_session, web.id) == []


class TestHeroSlideService:
    """Tests for hero slides."""

    @pytest.mark.asyncio
    async def test_last_visible_slide_cannot_be_hidden(self, db_session):
        only = await hero_slide_service.create_hero_slide(db_session, _slide_fields("Only"))

        with pytest.raises(InvalidRequestError):
            await hero_slide_service.toggle_hero_slide_visibility(db_session, only.id)

    @pytest.mark.asyncio
    async def test_hide_one_of_two(self, db_session):
        first = await hero_slide_service.create_hero_slide(db_session, _slide_fields("One"))
        await hero_slide_service.create_hero_slide(db_session, _slide_fields("Two"))

        hidden = await hero_slide_service.toggle_hero_slide_visibility(db_session, first.id)

        assert hidden.is_visible is False
        visible = await hero_slide_service.list_hero_slides(db_session, visible_only=True)
        assert [s.title for s in visible] == ["Two"]


class TestProjectService:
    """Tests for projects and likes."""

    @pytest.mark.asyncio
    async def test_similar_title_conflicts(self, db_session):
        await project_service.create_project(db_session, _project_fields("Brand Refresh"))
        with pytest.raises(ConflictError):
            await project_service.create_project(db_session, _project_fields("brand refresh!"))

    @pytest.mark.asyncio
    async def test_retitle_regenerates_slug(self, db_session):
        project = await project_service.create_project(db_session, _project_fields("Old Name"))
        updated = await project_service.update_project(db_session, project.id, {"title": "New Name"})
        assert updated.slug == "new-name"

    @pytest.mark.asyncio
    async def test_like_once_per_visitor(self, db_session):
        project = await project_service.create_project(db_session, _project_fields("Poster"))

        assert await project_service.like_project(db_session, project.id, "a" * 64) == 1
        assert await project_service.like_project(db_session, project.id, "b" * 64) == 2
        with pytest.raises(ConflictError):
            await project_service.like_project(db_session, project.id, "a" * 64)

        assert (await project_service.get_project(db_session, project.id)).likes_count == 2

    @pytest.mark.asyncio
    async def test_like_missing_project(self, db_session):
        with pytest.raises(NotFoundError):
            await project_service.like_project(db_session, uuid4(), "a" * 64)

    @pytest.mark.asyncio
    async def test_delete_project_removes_its_likes(self, db_session):
        project = await project_service.create_project(db_session, _project_fields("Zine"))
        await project_service.like_project(db_session, project.id, "a" * 64)
        await project_service.add_gallery_image(db_session, project.id, "https://x/g.png")

        await project_service.delete_project(db_session, project.id)

        likes = await db_session.execute(select(func.count()).select_from(ProjectLike))
        images = await db_session.execute(select(func.count()).select_from(ProjectImage))
        assert likes.scalar_one() == 0
        assert images.scalar_one() == 0

    @pytest.mark.asyncio
    async def test_gallery_add_and_remove(self, db_session):
        project = await project_service.create_project(db_session, _project_fields("Poster"))
        image = await project_service.add_gallery_image(db_session, project.id, "https://x/g.png")

        assert await project_service.remove_gallery_images(db_session, project.id, [image.id]) == 1


class TestSkillService:
    """Tests for skills."""

    @pytest.mark.asyncio
    async def test_category_change_appends_to_new_partition(self, db_session):
        await skill_service.create_skill(db_session, {"name": "Listening", "category": SkillCategory.SOFT_SKILL})
        figma = await skill_service.create_skill(db_session, {"name": "Figma", "category": SkillCategory.HARD_SKILL})

        moved = await skill_service.update_skill(db_session, figma.id, {"category": SkillCategory.SOFT_SKILL})

        assert moved.category == SkillCategory.SOFT_SKILL
        assert moved.order == 2

    @pytest.mark.asyncio
    async def test_filter_by_category(self, db_session):
        await skill_service.create_skill(db_session, {"name": "Figma", "category": SkillCategory.HARD_SKILL})
        await skill_service.create_skill(db_session, {"name": "Empathy", "category": SkillCategory.SOFT_SKILL})

        soft = await skill_service.list_skills(db_session, SkillCategory.SOFT_SKILL)
        assert [s.name for s in soft] == ["Empathy"]


class TestExperienceService:
    """Tests for experience entries."""

    @pytest.mark.asyncio
    async def test_current_first_then_newest(self, db_session):
        def fields(company, year, current=False):
            return {
                "company": company,
                "role": "Designer",
                "start_date": datetime(year, 1, 1, tzinfo=timezone.utc),
                "is_current": current,
                "description": {"type": "doc", "content": []},
            }

        await experience_service.create_experience(db_session, fields("Old", 2015))
        await experience_service.create_experience(db_session, fields("Now", 2018, current=True))
        await experience_service.create_experience(db_session, fields("Recent", 2021))

        listed = await experience_service.list_experiences(db_session)
        assert [e.company for e in listed] == ["Now", "Recent", "Old"]


class TestMessageService:
    """Tests for contact messages."""

    @pytest.mark.asyncio
    async def test_read_marks_message_read(self, db_session):
        message = await message_service.create_message(db_session, "Ana", "ana@example.com", "Hello")
        assert message.is_read is False

        read = await message_service.read_message(db_session, message.id)
        assert read.is_read is True

        toggled = await message_service.toggle_message_read(db_session, message.id)
        assert toggled.is_read is False


class TestProfileService:
    """Tests for the singleton profile and educations."""

    @pytest.mark.asyncio
    async def test_education_requires_profile(self, db_session):
        with pytest.raises(NotFoundError):
            await profile_service.create_education(
                db_session, {"degree": "BA", "institution": "RISD", "start_year": 2010}
            )

    @pytest.mark.asyncio
    async def test_upsert_updates_single_row(self, db_session):
        created = await profile_service.upsert_profile(db_session, {"name": "Ana"})
        updated = await profile_service.upsert_profile(db_session, {"tagline": "Designer"})

        assert created.id == updated.id
        assert (updated.name, updated.tagline) == ("Ana", "Designer")

    @pytest.mark.asyncio
    async def test_educations_append(self, db_session, session_maker):
        await profile_service.upsert_profile(db_session, {"name": "Ana"})
        first = await profile_service.create_education(
            db_session, {"degree": "BA", "institution": "RISD", "start_year": 2010}
        )
        second = await profile_service.create_education(
            db_session, {"degree": "MA", "institution": "RCA", "start_year": 2015}
        )

        assert (first.order, second.order) == (1, 2)
        async with session_maker() as fresh:
            profile = await profile_service.get_profile(fresh)
            assert [e.degree for e in profile.educations] == ["BA", "MA"]


class TestSettingsService:
    """Tests for site settings."""

    @pytest.mark.asyncio
    async def test_defaults_when_nothing_stored(self, db_session):
        settings = await settings_service.get_site_settings(db_session)
        assert settings.site_name == "Portfolio"
        assert settings.primary_color == "#FFD369"

    @pytest.mark.asyncio
    async def test_update_creates_row_from_defaults(self, db_session):
        saved = await settings_service.update_site_settings(db_session, {"site_name": "Ana Studio"})

        assert saved.site_name == "Ana Studio"
        assert saved.secondary_color == "#1a1a2e"
        again = await settings_service.update_site_settings(db_session, {"footer_text": "Bye"})
        assert again.id == saved.id


class TestDashboardService:
    """Tests for dashboard statistics."""

    @pytest.mark.asyncio
    async def test_counts(self, db_session):
        client = await client_service.create_client(db_session, {"name": "Acme", "slug": "acme"})
        await client_service.create_client(db_session, {"name": "Globex", "slug": "globex"})
        await client_service.toggle_client_visibility(db_session, client.id)
        message = await message_service.create_message(db_session, "Ana", "ana@example.com", "Hi")
        await message_service.create_message(db_session, "Bo", "bo@example.com", "Yo")
        await message_service.read_message(db_session, message.id)

        stats = await dashboard_service.get_stats(db_session)

        assert (stats.total_clients, stats.visible_clients) == (2, 1)
        assert (stats.total_messages, stats.unread_messages) == (2, 1)
        assert len(stats.recent_messages) == 2


class TestAdminService:
    """Tests for the admin allow-list."""

    @pytest.mark.asyncio
    async def test_membership_is_case_insensitive(self, db_session):
        await admin_service.add_admin(db_session, "Owner@Example.com")

        assert await admin_service.is_admin(db_session, "owner@example.com") is True
        assert await admin_service.is_admin(db_session, "other@example.com") is False
        assert await admin_service.is_admin(db_session, None) is False

    @pytest.mark.asyncio
    async def test_add_twice_returns_existing(self, db_session):
        first = await admin_service.add_admin(db_session, "owner@example.com")
        second = await admin_service.add_admin(db_session, "OWNER@example.com")
        assert first.id == second.id
