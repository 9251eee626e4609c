"""
End-to-end tests for ModuleGenerator: schema file in, module directory out.
"""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from prisma_to_nest.pipeline import (
    Capability,
    GeneratorConfig,
    ModelNotFoundError,
    ModuleGenerator,
    OutputConfig,
    OutputMode,
    SchemaReadError,
)

SCHEMA_PATH = Path(__file__).parent / "test_data" / "schema.prisma"

PRODUCT_FILES = [
    "dto/create-product.dto.ts",
    "dto/update-product.dto.ts",
    "product.repository.ts",
    "product.service.ts",
    "product.controller.ts",
    "product.module.ts",
]


@pytest.fixture
def workspace(tmp_path):
    schema = tmp_path / "prisma" / "schema.prisma"
    schema.parent.mkdir()
    shutil.copy(SCHEMA_PATH, schema)
    return tmp_path


def make_generator(workspace: Path, mode: OutputMode = OutputMode.FORCE) -> ModuleGenerator:
    config = GeneratorConfig(
        schema_path=str(workspace / "prisma" / "schema.prisma"),
        modules_path=str(workspace / "src" / "modules"),
        add_generation_comment=False,
        output=OutputConfig(mode=mode),
    )
    return ModuleGenerator(config)


class TestGenerateModule:
    def test_writes_six_files(self, workspace):
        result = make_generator(workspace).generate_module("Product")
        module_dir = workspace / "src" / "modules" / "product"
        assert result.module_dir == module_dir
        assert result.written == [module_dir / name for name in PRODUCT_FILES]
        for name in PRODUCT_FILES:
            assert (module_dir / name).is_file()

    def test_model_name_is_case_insensitive(self, workspace):
        result = make_generator(workspace).generate_module("productcategory")
        assert result.model.name == "ProductCategory"
        assert (workspace / "src" / "modules" / "product-category" / "product-category.module.ts").is_file()

    def test_on_write_reports_each_file(self, workspace):
        seen = []
        make_generator(workspace).generate_module("Product", on_write=seen.append)
        assert [p.relative_to(workspace / "src" / "modules" / "product").as_posix() for p in seen] == PRODUCT_FILES

    def test_end_to_end_product(self, workspace):
        generator = make_generator(workspace)
        result = generator.generate_module("Product")
        assert result.model.has_timestamps
        assert not result.model.has_soft_delete

        module_dir = result.module_dir
        dto = (module_dir / "dto" / "create-product.dto.ts").read_text()
        assert "  name: string;" in dto
        assert "  sku?: string;" in dto

        repository = (module_dir / "product.repository.ts").read_text()
        assert "BaseRepository" not in repository
        assert "findById(id: number)" in repository
        assert "findById(id: number)" in (module_dir / "product.service.ts").read_text()
        assert "@Param('id', ParseIntPipe) id: number" in (module_dir / "product.controller.ts").read_text()

    def test_model_not_found(self, workspace):
        generator = make_generator(workspace)
        with pytest.raises(ModelNotFoundError) as exc_info:
            generator.generate_module("Nope")
        assert str(exc_info.value) == 'Model "Nope" not found in schema'
        assert not (workspace / "src").exists()

    def test_unreadable_schema(self, tmp_path):
        with pytest.raises(SchemaReadError):
            make_generator(tmp_path).generate_module("Product")
        assert not (tmp_path / "src").exists()

    def test_unrelated_files_are_kept(self, workspace):
        module_dir = workspace / "src" / "modules" / "product"
        module_dir.mkdir(parents=True)
        (module_dir / "product.helpers.ts").write_text("export const keep = true;\n")
        make_generator(workspace).generate_module("Product")
        assert (module_dir / "product.helpers.ts").read_text() == "export const keep = true;\n"

    def test_regeneration_is_identical(self, workspace):
        generator = make_generator(workspace)
        generator.generate_module("Category")
        module_dir = workspace / "src" / "modules" / "category"
        first = {p: p.read_text() for p in module_dir.rglob("*.ts")}
        generator.generate_module("Category")
        second = {p: p.read_text() for p in module_dir.rglob("*.ts")}
        assert first == second


class TestOutputModes:
    def test_force_overwrites(self, workspace):
        target = workspace / "src" / "modules" / "product" / "product.service.ts"
        target.parent.mkdir(parents=True)
        target.write_text("// hand written\n")
        make_generator(workspace, OutputMode.FORCE).generate_module("Product")
        assert "export class ProductService" in target.read_text()

    def test_error_mode_writes_nothing(self, workspace):
        target = workspace / "src" / "modules" / "product" / "product.service.ts"
        target.parent.mkdir(parents=True)
        target.write_text("// hand written\n")
        with pytest.raises(FileExistsError):
            make_generator(workspace, OutputMode.ERROR_IF_EXISTS).generate_module("Product")
        assert target.read_text() == "// hand written\n"
        assert not (target.parent / "product.module.ts").exists()

    def test_skip_mode_keeps_existing(self, workspace):
        target = workspace / "src" / "modules" / "product" / "product.service.ts"
        target.parent.mkdir(parents=True)
        target.write_text("// hand written\n")
        result = make_generator(workspace, OutputMode.SKIP).generate_module("Product")
        assert result.skipped == [target]
        assert len(result.written) == 5
        assert target.read_text() == "// hand written\n"


class TestListAndGenerateAll:
    def test_list_models(self, workspace):
        listed = make_generator(workspace).list_models()
        assert [(m.name, c) for m, c in listed] == [
            ("Product", Capability.BASIC),
            ("Category", Capability.RICH),
            ("ProductCategory", Capability.BASIC),
            ("DomMetaKeyword", Capability.BASIC),
        ]
        assert not (workspace / "src").exists()

    def test_generate_all(self, workspace):
        results = make_generator(workspace).generate_all()
        assert [r.module_dir.name for r in results] == ["product", "category", "product-category", "dom-meta-keyword"]
        assert all(len(r.written) == 6 for r in results)


if __name__ == "__main__":
    pytest.main([__file__])
