"""
Response shapes for job postings.

Several job fields are stored as delimiter-joined strings and only split here.
"""
from ..models.ids import is_valid_object_id
from ..models.job import Job


def split_list(value: str | None, sep: str) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(sep) if part.strip()]


def format_job_listing(job: Job) -> dict:
    return {
        "id": job.id,
        "company": job.company,
        "role": job.role,
        "location": {
            "city": job.city,
            "country": job.country,
        },
        "employment": {
            "type": job.employment_type,
            "mode": job.onsite,
            "level": job.skill_level,
        },
    }


def format_job_details(job: Job) -> dict:
    return {
        "id": job.id,
        "company": job.company,
        "role": job.role,
        "location": {
            "city": job.city,
            "country": job.country,
        },
        "urls": {
            "linkedin": job.linkedin_url,
            "alternative": job.alternative_url,
        },
        "employment": {
            "type": job.employment_type,
            "mode": job.onsite,
            "level": job.skill_level,
            "minExperience": job.min_years_experience,
        },
        "description": {
            "summary": job.job_description,
            "responsibilities": split_list(job.key_responsibilities, ";"),
            "requirements": job.educational_requirements,
        },
        "skills": {
            "required": split_list(job.preferred_skills, ";"),
            "languages": split_list(job.languages, ","),
            "technologies": split_list(job.technologies_mentioned, ","),
        },
    }


# Document field names used by job exports, mapped to Job columns.
SOURCE_FIELDS = {
    "Company": "company",
    "Role": "role",
    "Country": "country",
    "City": "city",
    "LinkedinURL": "linkedin_url",
    "AlternativeURL": "alternative_url",
    "EmploymentType": "employment_type",
    "Onsite": "onsite",
    "SkillLevel": "skill_level",
    "MinimumYearsOfExperience": "min_years_experience",
    "JobDescription": "job_description",
    "KeyResponsibilities": "key_responsibilities",
    "PreferredSkills": "preferred_skills",
    "Languages": "languages",
    "TechnologiesMentioned": "technologies_mentioned",
    "EducationalRequirements": "educational_requirements",
}


def job_fields_from_document(doc: dict) -> dict:
    """Map an exported job document (``Company``, ``Role``, ...) to Job column values."""
    fields = {column: doc.get(key) for key, column in SOURCE_FIELDS.items() if key in doc}
    years = fields.get("min_years_experience")
    if years is not None and years != "":
        fields["min_years_experience"] = int(years)
    else:
        fields.pop("min_years_experience", None)
    raw_id = doc.get("_id")
    if isinstance(raw_id, dict):
        # mongoexport extended JSON: {"$oid": "..."}
        raw_id = raw_id.get("$oid")
    if is_valid_object_id(raw_id):
        fields["id"] = raw_id.lower()
    return fields
