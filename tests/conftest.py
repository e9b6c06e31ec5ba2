"""Shared pytest fixtures for the shadpanel test suite.

Provides reusable fixtures for:
- Sample Prisma schema text and its parsed table
- Temporary shadpanel project directories with a schema in place
- Scaffold configuration pointing at those directories
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from shadpanel.config import ScaffoldConfig
from shadpanel.parser.models import SchemaTable
from shadpanel.parser.schema import parse_schema


# ---------------------------------------------------------------------------
# Schema text
# ---------------------------------------------------------------------------

SAMPLE_SCHEMA = textwrap.dedent("""\
    datasource db {
      provider = "postgresql"
      url      = env("DATABASE_URL")
    }

    generator client {
      provider = "prisma-client-js"
    }

    model Invoice {
      id       Int       @id @default(autoincrement())
      total    Float
      paid     Boolean   @default(false)
      status   Status    @default(DRAFT)
      customer Customer?
    }

    model Customer {
      id       String    @id @default(cuid())
      name     String
      email    String    @unique
      invoices Invoice[]
    }

    // Blog content
    model Post {
      id        Int      @id @default(autoincrement())
      title     String
      body      String?
      published Boolean  @default(false)
      author    User     @relation(fields: [authorId], references: [id])
      authorId  Int
      createdAt DateTime @default(now())

      @@index([authorId])
    }

    model User {
      id    Int    @id
      email String @unique
      role  Role   @default(USER)
      posts Post[]
    }

    model Address {
      id     Int    @id @default(autoincrement())
      street String
    }

    enum Status {
      DRAFT
      PAID
    }

    enum Role {
      // access levels
      USER
      ADMIN
    }
""")


MENU_DOCUMENT = textwrap.dedent("""\
    import { LucideIcon, LayoutDashboard } from "lucide-react"

    export interface MenuItem {
      title: string
      url?: string
      icon?: LucideIcon
      items?: MenuItem[]
    }

    export const defaultMenuConfig = {
      navMain: [
        {
          title: "Overview",
          items: [
            {
              title: "Dashboard",
              url: "/admin/dashboard",
              icon: LayoutDashboard,
            },
          ],
        },
        {
          title: "Settings",
          items: [],
        },
      ],
    }
""")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_schema_text() -> str:
    """Raw schema covering scalars, enums, relations and block attributes."""
    return SAMPLE_SCHEMA


@pytest.fixture
def sample_schema(sample_schema_text: str) -> SchemaTable:
    """The parsed ``SAMPLE_SCHEMA``."""
    return parse_schema(sample_schema_text)


@pytest.fixture
def menu_document() -> str:
    """A navigation document with two groups and one existing entry."""
    return MENU_DOCUMENT


@pytest.fixture
def project_dir(tmp_path: Path, sample_schema_text: str) -> Path:
    """Temporary shadpanel project with ``prisma/schema.prisma`` in place."""
    root = tmp_path / "admin-app"
    schema_file = root / "prisma" / "schema.prisma"
    schema_file.parent.mkdir(parents=True)
    schema_file.write_text(sample_schema_text, encoding="utf-8")
    yield root


@pytest.fixture
def scaffold_config(project_dir: Path) -> ScaffoldConfig:
    """Default configuration rooted at ``project_dir``."""
    return ScaffoldConfig(project_root=project_dir)
