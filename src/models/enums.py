"""
Enum definitions for the ProLegal client
"""

from enum import Enum

# User-related enums
class UserRole(str, Enum):
    ADMIN = "admin"
    ATTORNEY = "attorney"
    PARALEGAL = "paralegal"
    STAFF = "staff"

class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"

class ActiveStatus(str, Enum):
    """Two-state status shared by departments and law firms"""
    ACTIVE = "active"
    INACTIVE = "inactive"

# Case-related enums
class CaseType(str, Enum):
    CIVIL = "civil"
    CRIMINAL = "criminal"
    FAMILY = "family"
    CORPORATE = "corporate"
    EMPLOYMENT = "employment"
    REAL_ESTATE = "real_estate"
    INTELLECTUAL_PROPERTY = "intellectual_property"
    TAX = "tax"
    BANKRUPTCY = "bankruptcy"
    OTHER = "other"

class CaseStatus(str, Enum):
    OPEN = "open"
    PENDING = "pending"
    CLOSED = "closed"
    ARCHIVED = "archived"
    ON_HOLD = "on_hold"

class CasePriority(str, Enum):
    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

class CaseAssignmentRole(str, Enum):
    LEAD_ATTORNEY = "lead_attorney"
    ASSOCIATE_ATTORNEY = "associate_attorney"
    PARALEGAL = "paralegal"
    ASSISTANT = "assistant"

class CaseUpdateType(str, Enum):
    STATUS_CHANGE = "status_change"
    ASSIGNMENT = "assignment"
    DOCUMENT_ADDED = "document_added"
    NOTE = "note"
    COURT_DATE = "court_date"
    OTHER = "other"

# Vendor / law firm enums
class CompanyType(str, Enum):
    CORPORATION = "corporation"
    PARTNERSHIP = "partnership"
    INDIVIDUAL = "individual"
    GOVERNMENT = "government"
    OTHER = "other"

class VendorStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    BLACKLISTED = "blacklisted"

class FirmType(str, Enum):
    IN_HOUSE = "in_house"
    EXTERNAL = "external"

# Contract enums
class ContractStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    EXPIRED = "expired"
    TERMINATED = "terminated"
    RENEWED = "renewed"

class ContractAssignmentRole(str, Enum):
    MANAGER = "manager"
    REVIEWER = "reviewer"
    APPROVER = "approver"
    MONITOR = "monitor"

# Document enums
class DocumentType(str, Enum):
    CONTRACT = "contract"
    EVIDENCE = "evidence"
    CORRESPONDENCE = "correspondence"
    COURT_FILING = "court_filing"
    RESEARCH = "research"
    OTHER = "other"

class DocumentCategory(str, Enum):
    CASES = "cases"
    CONTRACTS = "contracts"
    TITLE_DEEDS = "title_deeds"
    POLICIES = "policies"
    FRAMEWORKS = "frameworks"
    CORRESPONDENCES = "correspondences"
    BOARD_MINUTES = "board_minutes"
    MANAGEMENT_MINUTES = "management_minutes"
    SOPS = "sops"
    GOVERNANCE = "governance"
    OTHER = "other"

class DocumentStatus(str, Enum):
    DRAFT = "draft"
    FINAL = "final"
    ARCHIVED = "archived"
    DELETED = "deleted"

# Task enums
class TaskType(str, Enum):
    CASE_RELATED = "case_related"
    ADMINISTRATIVE = "administrative"
    CLIENT_RELATED = "client_related"
    COURT_RELATED = "court_related"
    RESEARCH = "research"
    OTHER = "other"

class TaskPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"

# Scraping enums
class SourceType(str, Enum):
    """Source type as stored by the backend"""
    CASE_LAW = "case_law"
    LEGISLATION = "legislation"
    REGULATION = "regulation"
    GAZETTE = "gazette"
    NEWS = "news"
    OTHER = "other"

# Compliance enums
class ComplianceRunStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    COMPLETED = "completed"
    EXPIRED = "expired"
    PAUSED = "paused"

class ComplianceRunFrequency(str, Enum):
    ONCE = "once"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    BIMONTHLY = "bimonthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"

class QuestionType(str, Enum):
    YESNO = "yesno"
    SCORE = "score"
    MULTIPLE = "multiple"
    TEXT = "text"

class ComplianceType(str, Enum):
    TAX_RETURN = "tax_return"
    LICENSE_RENEWAL = "license_renewal"
    CERTIFICATION = "certification"
    REGISTRATION = "registration"
    PERMIT = "permit"
    INSURANCE = "insurance"
    AUDIT = "audit"
    REPORT = "report"
    OTHER = "other"

class ComplianceFrequency(str, Enum):
    ONCE = "once"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"
    BIENNIALLY = "biennially"
    CUSTOM = "custom"

class ComplianceStatus(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"
    OVERDUE = "overdue"
    COMPLETED = "completed"
    EXPIRED = "expired"

class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

class ReminderType(str, Enum):
    TWO_WEEKS = "two_weeks"
    ONE_WEEK = "one_week"
    DUE_DATE = "due_date"
    OVERDUE = "overdue"

class ReminderStatus(str, Enum):
    PENDING = "pending"
    SENT = "sent"
    CONFIRMED = "confirmed"
    FAILED = "failed"

class ConfirmationType(str, Enum):
    SUBMITTED = "submitted"
    RENEWED = "renewed"
    EXTENDED = "extended"
    COMPLETED = "completed"

# Budget enums
class BudgetPeriod(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"

class BudgetStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    CLOSED = "closed"
    ARCHIVED = "archived"

class ApprovalStatus(str, Enum):
    """Approval workflow status for expenditures and transfers"""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    PAID = "paid"

class UtilizationStatus(str, Enum):
    ON_TRACK = "on_track"
    AT_RISK = "at_risk"
    OVER_BUDGET = "over_budget"

# Calendar enums
class EventType(str, Enum):
    COURT_DATE = "court_date"
    MEETING = "meeting"
    DEADLINE = "deadline"
    CLIENT_MEETING = "client_meeting"
    INTERNAL_MEETING = "internal_meeting"
    OTHER = "other"

class EventStatus(str, Enum):
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

class AttendeeRole(str, Enum):
    ORGANIZER = "organizer"
    ATTENDEE = "attendee"
    OPTIONAL = "optional"

class ResponseStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    TENTATIVE = "tentative"

# Timesheet enums
class TimesheetCategory(str, Enum):
    CASE_WORK = "Case Work"
    CLIENT_MEETING = "Client Meeting"
    COURT_APPEARANCE = "Court Appearance"
    RESEARCH = "Research"
    ADMINISTRATIVE = "Administrative"
    OTHER = "Other"
