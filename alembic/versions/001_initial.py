"""
Initial migration - Juris Gestão

Revision ID: 001
Create Date: 2024-01-01 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # ========================
    # ENUMS (valores exatos do Python Enum)
    # ========================

    op.execute("CREATE TYPE casestatus AS ENUM ('ongoing', 'completed', 'suspended', 'archived')")
    op.execute("CREATE TYPE activitytype AS ENUM ('deadline', 'hearing', 'petition', 'document')")
    op.execute("CREATE TYPE activitypriority AS ENUM ('low', 'medium', 'high', 'urgent')")
    op.execute("CREATE TYPE hearingtype AS ENUM ('conciliation', 'instruction', 'judgment')")
    op.execute("CREATE TYPE financialtype AS ENUM ('fee', 'cost', 'compensation')")
    op.execute("CREATE TYPE financialstatus AS ENUM ('pending', 'paid', 'overdue')")
    op.execute("CREATE TYPE communicationtype AS ENUM ('email', 'phone', 'meeting', 'letter')")

    # ========================
    # TABELA: clients
    # ========================
    op.create_table(
        "clients",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        # Contato
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(30), nullable=True),
        # CPF/CNPJ
        sa.Column("document", sa.String(30), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_clients_name", "clients", ["name"])

    # ========================
    # TABELA: cases
    # ========================
    op.create_table(
        "cases",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("process_number", sa.String(50), nullable=False, comment="Formato: NNNNNNN-DD.AAAA.J.TR.OOOO"),
        sa.Column("court", sa.String(100), nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=False),
        # Partes e tipo de ação
        sa.Column("action_type", sa.String(255), nullable=False),
        sa.Column("plaintiff", sa.String(255), nullable=False),
        sa.Column("defendant", sa.String(255), nullable=False),
        sa.Column("case_value", sa.Numeric(15, 2), nullable=True),
        sa.Column("status", postgresql.ENUM("ongoing", "completed", "suspended", "archived", name="casestatus", create_type=False), nullable=False, server_default="ongoing"),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"]),
    )
    op.create_index("ix_cases_process_number", "cases", ["process_number"], unique=True)
    op.create_index("ix_cases_client_id", "cases", ["client_id"])
    op.create_index("ix_cases_status", "cases", ["status"])

    # ========================
    # TABELA: activities
    # ========================
    op.create_table(
        "activities",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("case_id", sa.Integer(), nullable=False),
        sa.Column("type", postgresql.ENUM("deadline", "hearing", "petition", "document", name="activitytype", create_type=False), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("priority", postgresql.ENUM("low", "medium", "high", "urgent", name="activitypriority", create_type=False), nullable=False, server_default="medium"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["case_id"], ["cases.id"]),
    )
    op.create_index("ix_activities_case_id", "activities", ["case_id"])
    op.create_index("ix_activities_due_date", "activities", ["due_date"])

    # ========================
    # TABELA: hearings
    # ========================
    op.create_table(
        "hearings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("case_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("type", postgresql.ENUM("conciliation", "instruction", "judgment", name="hearingtype", create_type=False), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["case_id"], ["cases.id"]),
    )
    op.create_index("ix_hearings_case_id", "hearings", ["case_id"])
    op.create_index("ix_hearings_date", "hearings", ["date"])

    # ========================
    # TABELA: documents
    # ========================
    op.create_table(
        "documents",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("case_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(100), nullable=False),
        sa.Column("file_path", sa.String(500), nullable=True),
        sa.Column("uploaded_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["case_id"], ["cases.id"]),
    )
    op.create_index("ix_documents_case_id", "documents", ["case_id"])

    # ========================
    # TABELA: financial
    # ========================
    op.create_table(
        "financial",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("case_id", sa.Integer(), nullable=False),
        sa.Column("type", postgresql.ENUM("fee", "cost", "compensation", name="financialtype", create_type=False), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("amount", sa.Numeric(15, 2), nullable=False),
        sa.Column("status", postgresql.ENUM("pending", "paid", "overdue", name="financialstatus", create_type=False), nullable=False, server_default="pending"),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("paid_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["case_id"], ["cases.id"]),
    )
    op.create_index("ix_financial_case_id", "financial", ["case_id"])
    op.create_index("ix_financial_status", "financial", ["status"])

    # ========================
    # TABELA: communications
    # ========================
    op.create_table(
        "communications",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("case_id", sa.Integer(), nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=False),
        sa.Column("type", postgresql.ENUM("email", "phone", "meeting", "letter", name="communicationtype", create_type=False), nullable=False),
        sa.Column("subject", sa.String(255), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("date", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["case_id"], ["cases.id"]),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"]),
    )
    op.create_index("ix_communications_case_id", "communications", ["case_id"])
    op.create_index("ix_communications_client_id", "communications", ["client_id"])


def downgrade() -> None:
    # Dropar tabelas em ordem reversa (respeitar FKs)
    op.drop_table("communications")
    op.drop_table("financial")
    op.drop_table("documents")
    op.drop_table("hearings")
    op.drop_table("activities")
    op.drop_table("cases")
    op.drop_table("clients")

    # Dropar enums
    op.execute("DROP TYPE IF EXISTS communicationtype")
    op.execute("DROP TYPE IF EXISTS financialstatus")
    op.execute("DROP TYPE IF EXISTS financialtype")
    op.execute("DROP TYPE IF EXISTS hearingtype")
    op.execute("DROP TYPE IF EXISTS activitypriority")
    op.execute("DROP TYPE IF EXISTS activitytype")
    op.execute("DROP TYPE IF EXISTS casestatus")
