"""Unit tests for CategoryService."""

from unittest.mock import AsyncMock

from pennywise.application.services import CategoryService
from pennywise.domain.category import Category, CategoryAlreadyExistsError
from pennywise.domain.shared import Err, ErrorCode, Ok


class TestCategoryService:
    def setup_method(self):
        """Set up test fixtures."""
        self.category_repo = AsyncMock()
        self.service = CategoryService(category_repository=self.category_repo)

    async def test_list(self):
        categories = [Category(id=1, name="Housing"), Category(id=2, name="Food")]
        self.category_repo.list_all.return_value = categories

        result = await self.service.list_categories()

        assert isinstance(result, Ok)
        assert result.value == categories

    async def test_list_empty_is_not_found(self):
        self.category_repo.list_all.return_value = []

        result = await self.service.list_categories()

        assert isinstance(result, Err)
        assert result.code == ErrorCode.CATEGORY_NOT_FOUND
        assert result.message == "No categories found."

    async def test_get_missing(self):
        self.category_repo.find_by_id.return_value = None

        result = await self.service.get_category(5)

        assert isinstance(result, Err)
        assert result.code == ErrorCode.CATEGORY_NOT_FOUND

    async def test_create_trims_name(self):
        self.category_repo.create.side_effect = lambda c: Category(id=7, name=c.name)

        result = await self.service.create_category("  Pets ")

        assert isinstance(result, Ok)
        assert result.value.name == "Pets"
        assert result.value.id == 7

    async def test_create_blank_name(self):
        result = await self.service.create_category("   ")

        assert isinstance(result, Err)
        assert result.code == ErrorCode.VALIDATION_ERROR
        self.category_repo.create.assert_not_called()

    async def test_create_duplicate(self):
        self.category_repo.create.side_effect = CategoryAlreadyExistsError("Pets")

        result = await self.service.create_category("Pets")

        assert isinstance(result, Err)
        assert result.code == ErrorCode.CATEGORY_NAME_TAKEN

    async def test_rename(self):
        self.category_repo.find_by_id.return_value = Category(id=7, name="Pets")
        self.category_repo.update.side_effect = lambda c: c

        result = await self.service.rename_category(7, "Animals")

        assert isinstance(result, Ok)
        assert result.value.name == "Animals"

    async def test_rename_to_blank_name(self):
        result = await self.service.rename_category(7, " \t")

        assert isinstance(result, Err)
        assert result.code == ErrorCode.VALIDATION_ERROR
        self.category_repo.update.assert_not_called()

    async def test_rename_missing(self):
        self.category_repo.find_by_id.return_value = None

        result = await self.service.rename_category(7, "Animals")

        assert isinstance(result, Err)
        assert result.code == ErrorCode.CATEGORY_NOT_FOUND
        self.category_repo.update.assert_not_called()

    async def test_rename_to_taken_name(self):
        self.category_repo.find_by_id.return_value = Category(id=7, name="Pets")
        self.category_repo.update.side_effect = CategoryAlreadyExistsError("Food")

        result = await self.service.rename_category(7, "Food")

        assert isinstance(result, Err)
        assert result.code == ErrorCode.CATEGORY_NAME_TAKEN

    async def test_delete(self):
        self.category_repo.delete.return_value = True

        result = await self.service.delete_category(7)

        assert isinstance(result, Ok)

    async def test_delete_missing(self):
        self.category_repo.delete.return_value = False

        result = await self.service.delete_category(7)

        assert isinstance(result, Err)
        assert result.code == ErrorCode.CATEGORY_NOT_FOUND
