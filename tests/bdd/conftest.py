"""Shared fixtures and steps for BDD tests."""

from __future__ import annotations

import pytest
from pytest_bdd import given, parsers, when

from sqlyac.usecases.document_parser import DocumentParser

SAMPLE_DOCUMENTS = {
    "three_statements": """---
-- @name CreateUsersTable
CREATE TABLE users (
    id INTEGER PRIMARY KEY,
    username VARCHAR(50) NOT NULL
);

---
-- @name InsertSampleUsers
INSERT INTO users (username) VALUES
    ('alice'),
    ('bob');

---
-- @name GetAllUsers
SELECT * FROM users ORDER BY username;
---""",
    "unnamed_blocks": """---
SELECT * FROM users;

---
SELECT * FROM orders;
---""",
    "renamed_block": """---
-- @name First
SELECT 1;
-- @name Second
---""",
    "commented_block": """---
-- @name Commented
-- DROP TABLE users
SELECT 1
  -- DELETE FROM users
---- old section ----
FROM users;
---""",
    "variables": """SET @user_id=123;
SET @status="active";

---
-- @name GetUser
SELECT * FROM t WHERE id=@user_id AND s=@status;
---""",
}


@pytest.fixture
def context():
    """Shared context for passing state between steps."""
    return {}


@given(parsers.parse('the sample document "{sample}"'))
def sample_document(context: dict, sample: str):
    """Select one of the SAMPLE_DOCUMENTS."""
    context["text"] = SAMPLE_DOCUMENTS[sample]


@when("I parse the document")
def parse_document(context: dict):
    """Parse the selected document text."""
    context["document"] = DocumentParser().parse(context["text"])
