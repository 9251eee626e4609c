import pytest

from prisma_to_nest.pipeline.analyzer import BUILTIN_SCALARS, classify_field, is_relation_type, map_type
from prisma_to_nest.pipeline.schema_ast.nodes import Field


class TestTypeMapping:
    @pytest.mark.parametrize(
        "prisma_type,ts_type",
        [
            ("String", "string"),
            ("Int", "number"),
            ("BigInt", "bigint"),
            ("Boolean", "boolean"),
            ("DateTime", "Date"),
            ("Decimal", "Decimal"),
            ("Json", "any"),
        ],
    )
    def test_builtin_scalars(self, prisma_type, ts_type):
        assert map_type(prisma_type) == ts_type

    @pytest.mark.parametrize("prisma_type", ["Category", "Float", "Bytes", "Role"])
    def test_unknown_types_fall_back_to_any(self, prisma_type):
        assert map_type(prisma_type) == "any"


class TestRelationDetection:
    def test_capitalized_non_builtin_is_relation(self):
        assert is_relation_type("Category")
        assert is_relation_type("Category[]")

    @pytest.mark.parametrize("prisma_type", sorted(BUILTIN_SCALARS))
    def test_builtin_scalars_are_not_relations(self, prisma_type):
        assert not is_relation_type(prisma_type)

    def test_lowercase_type_is_not_relation(self):
        assert not is_relation_type("string")

    def test_capitalized_unknown_scalar_is_misclassified(self):
        """The rule is a heuristic: scalars outside the builtin set look like relations"""
        assert is_relation_type("Float")


class TestClassifyField:
    def test_plain_scalar(self):
        field = classify_field("name", "String")
        assert field == Field(name="name", type_name="String")

    def test_attributes_in_any_order(self):
        field = classify_field("id", "Int", None, ' @default(autoincrement()) @unique @id')
        assert field.is_id
        assert field.is_unique
        assert field.has_default
        assert not field.is_optional

    def test_optional_marker(self):
        field = classify_field("sku", "String", "?", ' @default("x")')
        assert field.is_optional
        assert field.has_default

    def test_array_marker_is_stripped(self):
        field = classify_field("tags", "String[]")
        assert field.is_array
        assert field.type_name == "String"
        assert not field.is_relation

    def test_relation_field(self):
        field = classify_field("children", "Category[]", None, ' @relation("CategoryTree")')
        assert field.is_relation
        assert field.relation_name == "Category"
        assert field.is_array
        assert field.type_name == "Category"

    def test_block_attribute_is_not_field_attribute(self):
        field = classify_field("slug", "String", None, " // see @@id")
        assert not field.is_id

    def test_attribute_text_inside_string_literal(self):
        field = classify_field("tag", "String", None, ' @default("@id")')
        assert not field.is_id
        assert field.has_default

    def test_escaped_quote_inside_string_literal(self):
        field = classify_field("tag", "String", None, ' @default("a\\"@unique") @id')
        assert field.is_id
        assert not field.is_unique

    def test_relation_name_requires_relation(self):
        with pytest.raises(ValueError):
            Field(name="x", type_name="String", relation_name="String")
        with pytest.raises(ValueError):
            Field(name="x", type_name="Category", is_relation=True)


if __name__ == "__main__":
    pytest.main([__file__])
