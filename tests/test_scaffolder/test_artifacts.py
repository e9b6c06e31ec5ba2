"""Tests for artifact rendering (shadpanel.scaffolder.artifacts).

Covers:
- Resource planning (identifier, form fields, columns, enum members)
- Content of each of the four artifacts
- Consistency between the create form and the create action
- Target paths and ordering of build_artifacts
"""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from shadpanel.config import ScaffoldConfig
from shadpanel.errors import IdentifierNotFoundError
from shadpanel.naming import derive_identity
from shadpanel.parser.schema import parse_schema
from shadpanel.scaffolder.artifacts import (
    GeneratedArtifact,
    ResourcePlan,
    build_artifacts,
    plan_resource,
    render_actions,
    render_create_page,
    render_edit_page,
    render_list_page,
)
from shadpanel.scaffolder.templates import TemplateRenderer


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def config(tmp_path: Path) -> ScaffoldConfig:
    return ScaffoldConfig(project_root=tmp_path)


def _plan(schema, model_name: str) -> ResourcePlan:
    model = schema.models[model_name]
    return plan_resource(derive_identity(model.name), model, schema)


@pytest.fixture
def invoice_plan(sample_schema) -> ResourcePlan:
    return _plan(sample_schema, "Invoice")


@pytest.fixture
def customer_plan(sample_schema) -> ResourcePlan:
    return _plan(sample_schema, "Customer")


def _accessors(content: str) -> set[str]:
    return set(re.findall(r"accessor='(\w+)'", content))


def _create_call_keys(content: str) -> set[str]:
    call = re.search(r"await createInvoice\(\{(.*?)\}\)", content, re.DOTALL)
    assert call is not None
    return set(re.findall(r"(\w+): values\.\1", call.group(1)))


def _declared_action_fields(content: str) -> set[str]:
    declared = re.search(r"const invoiceFields = \[(.*?)\] as const", content)
    assert declared is not None
    return set(re.findall(r"'(\w+)'", declared.group(1)))


# ---------------------------------------------------------------------------
# Planning
# ---------------------------------------------------------------------------


class TestPlanResource:
    def test_invoice_plan(self, invoice_plan: ResourcePlan):
        assert invoice_plan.identifier.name == "id"
        assert invoice_plan.id_numeric
        assert [f.name for f in invoice_plan.fields] == ["total", "paid", "status"]
        assert [c.name for c in invoice_plan.columns] == ["total", "paid"]
        assert invoice_plan.enum_members == {"Status": ("DRAFT", "PAID")}

    def test_model_without_identifier(self):
        schema = parse_schema("model Log {\n  message String\n}\n")
        with pytest.raises(IdentifierNotFoundError):
            _plan(schema, "Log")


# ---------------------------------------------------------------------------
# Data-access routines
# ---------------------------------------------------------------------------


class TestActions:
    def test_routines_present(self, invoice_plan, config, renderer):
        content = render_actions(invoice_plan, config, renderer)
        for routine in (
            "export async function getInvoices()",
            "export async function getInvoiceById(id: number)",
            "export async function createInvoice(",
            "export async function updateInvoice(id: number,",
            "export async function deleteInvoice(id: number)",
        ):
            assert routine in content

    def test_delegate_and_import(self, invoice_plan, config, renderer):
        content = render_actions(invoice_plan, config, renderer)
        assert "import prisma from '@/lib/prisma'" in content
        assert "prisma.invoice.findMany({ take: 100 })" in content
        assert "where: { id: Number(id) }" in content

    def test_multi_word_delegate_is_lower_camel(self, config, renderer):
        schema = parse_schema("model BlogPost {\n  id Int @id\n  title String\n}\n")
        content = render_actions(_plan(schema, "BlogPost"), config, renderer)
        assert "prisma.blogPost.findMany" in content
        assert "export async function getBlogPosts()" in content

    def test_mutations_revalidate_list_route(self, invoice_plan, config, renderer):
        content = render_actions(invoice_plan, config, renderer)
        assert content.count("revalidatePath('/admin/dashboard/invoices')") == 3

    def test_mutations_return_result_shape(self, invoice_plan, config, renderer):
        content = render_actions(invoice_plan, config, renderer)
        assert content.count("return { success: false, message:") == 3
        assert content.count("throw new Error(") == 2

    def test_string_identifier(self, customer_plan, config, renderer):
        content = render_actions(customer_plan, config, renderer)
        assert "getCustomerById(id: string)" in content
        assert "where: { id: id }" in content

    def test_list_limit_configurable(self, invoice_plan, tmp_path, renderer):
        config = ScaffoldConfig(project_root=tmp_path, list_limit=25, data_client_import="@/db")
        content = render_actions(invoice_plan, config, renderer)
        assert "findMany({ take: 25 })" in content
        assert "import prisma from '@/db'" in content


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------


class TestListPage:
    def test_columns_and_actions(self, invoice_plan, config, renderer):
        content = render_list_page(invoice_plan, config, renderer)
        assert "export default function InvoicesPage()" in content
        assert "<TableTextColumn accessor='total' header='Total' />" in content
        assert "<TableTextColumn accessor='paid' header='Paid' />" in content
        assert "accessor='status'" not in content
        assert "from '@/app/admin/dashboard/invoices/actions'" in content
        assert "router.push('/admin/dashboard/invoices/create')" in content
        assert "router.push('/admin/dashboard/invoices/edit/' + row.id)" in content

    def test_searchable_columns(self, customer_plan, config, renderer):
        content = render_list_page(customer_plan, config, renderer)
        assert "<TableTextColumn accessor='name' header='Name' searchable />" in content
        assert "<TableTextColumn accessor='email' header='Email' searchable />" in content

    def test_delete_updates_local_list(self, invoice_plan, config, renderer):
        content = render_list_page(invoice_plan, config, renderer)
        assert "setData(prev => prev.filter(r => r.id !== row.id))" in content


class TestCreatePage:
    def test_inputs_by_field_type(self, invoice_plan, config, renderer):
        content = render_create_page(invoice_plan, config, renderer)
        assert "<FormInput accessor='total' label='Total' numeric />" in content
        assert "<FormCheckbox accessor='paid' label='Paid' />" in content
        assert (
            "<FormSelect accessor='status' label='Status' options={[{ label: 'DRAFT', value: 'DRAFT' }, "
            "{ label: 'PAID', value: 'PAID' }]} />"
        ) in content

    def test_identifier_and_relations_excluded(self, invoice_plan, config, renderer):
        content = render_create_page(invoice_plan, config, renderer)
        assert _accessors(content) == {"total", "paid", "status"}

    def test_email_input(self, customer_plan, config, renderer):
        content = render_create_page(customer_plan, config, renderer)
        assert "<FormInput accessor='email' label='Email' type='email' />" in content
        assert "<FormInput accessor='name' label='Name' type='text' />" in content

    def test_initial_values(self, invoice_plan, config, renderer):
        content = render_create_page(invoice_plan, config, renderer)
        assert "  paid: false," in content
        assert "  total: ''," in content

    def test_redirects_to_list(self, invoice_plan, config, renderer):
        content = render_create_page(invoice_plan, config, renderer)
        assert "router.push('/admin/dashboard/invoices')" in content
        assert "import { createInvoice } from '../actions'" in content

    def test_form_matches_create_action(self, invoice_plan, config, renderer):
        form = render_create_page(invoice_plan, config, renderer)
        actions = render_actions(invoice_plan, config, renderer)
        assert _accessors(form) == _create_call_keys(form) == _declared_action_fields(actions)


class TestEditPage:
    def test_numeric_route_param(self, invoice_plan, config, renderer):
        content = render_edit_page(invoice_plan, config, renderer)
        assert "await getInvoiceById(Number(idParam as string))" in content
        assert "await updateInvoice(Number(idParam as string), {" in content
        assert "from '../../actions'" in content

    def test_string_route_param(self, customer_plan, config, renderer):
        content = render_edit_page(customer_plan, config, renderer)
        assert "await getCustomerById(String(idParam))" in content

    def test_prepopulates_every_form_field(self, invoice_plan, config, renderer):
        content = render_edit_page(invoice_plan, config, renderer)
        for name in ("total", "paid", "status"):
            assert f"{name}: row.{name} ??" in content
        assert _accessors(content) == {"total", "paid", "status"}


# ---------------------------------------------------------------------------
# build_artifacts
# ---------------------------------------------------------------------------


class TestBuildArtifacts:
    def test_paths_and_order(self, invoice_plan, config, renderer):
        artifacts = build_artifacts(invoice_plan, config, renderer)
        base = config.project_root / "app" / "admin" / "dashboard" / "invoices"
        assert [a.target_path for a in artifacts] == [
            base / "actions.ts",
            base / "page.tsx",
            base / "create" / "page.tsx",
            base / "edit" / "[id]" / "page.tsx",
        ]
        assert all(isinstance(a, GeneratedArtifact) for a in artifacts)

    def test_rendering_is_pure(self, invoice_plan, config, renderer):
        first = build_artifacts(invoice_plan, config, renderer)
        second = build_artifacts(invoice_plan, config, renderer)
        assert first == second
        assert not (config.project_root / "app").exists()

    def test_default_renderer(self, invoice_plan, config):
        artifacts = build_artifacts(invoice_plan, config)
        assert artifacts[0].content.startswith("// generated by shadpanel CLI")
