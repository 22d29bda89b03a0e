"""Canned resumes returned when generation cannot produce model output.

Two variants exist and are not interchangeable:

* the generic resume holds neutral placeholders and answers suspicious input or
  a model response that refused the request;
* the sample resume is a named example profile whose summary explains the
  service is under high load. It answers provider failures and unparseable
  model output.
"""

import copy
import logging
from typing import Any

from resume_builder.app.llm.models import Language

log = logging.getLogger(__name__)

_GENERIC_RESUMES: dict[Language, dict[str, Any]] = {
    Language.ENGLISH: {
        "name": "Your Name",
        "email": "your.email@example.com",
        "phone": "+1 000 000 0000",
        "summary": (
            "Professional summary placeholder. Describe your work experience, "
            "education and skills to generate a personalized resume."
        ),
        "experience": [
            {
                "title": "Job Title",
                "company": "Company Name",
                "period": "Start Date - End Date",
                "description": (
                    "• Describe a key responsibility\n"
                    "• Describe an achievement with a measurable result\n"
                    "• Describe the tools or technologies you used"
                ),
            }
        ],
        "education": [
            {
                "degree": "Degree Name",
                "institution": "Institution Name",
                "period": "Start Year - End Year",
            }
        ],
        "certifications": [
            {
                "name": "Certification Name",
                "issuer": "Issuing Organization",
                "date": "Date",
            }
        ],
        "skills": ["Skill 1", "Skill 2", "Skill 3"],
    },
    Language.FRENCH: {
        "name": "Votre nom",
        "email": "votre.email@exemple.com",
        "phone": "+33 0 00 00 00 00",
        "summary": (
            "Résumé professionnel à compléter. Décrivez votre expérience, votre "
            "formation et vos compétences pour générer un CV personnalisé."
        ),
        "experience": [
            {
                "title": "Intitulé du poste",
                "company": "Nom de l'entreprise",
                "period": "Date de début - Date de fin",
                "description": (
                    "• Décrivez une responsabilité clé\n"
                    "• Décrivez une réalisation avec un résultat mesurable\n"
                    "• Décrivez les outils ou technologies utilisés"
                ),
            }
        ],
        "education": [
            {
                "degree": "Nom du diplôme",
                "institution": "Nom de l'établissement",
                "period": "Année de début - Année de fin",
            }
        ],
        "certifications": [
            {
                "name": "Nom de la certification",
                "issuer": "Organisme de délivrance",
                "date": "Date",
            }
        ],
        "skills": ["Compétence 1", "Compétence 2", "Compétence 3"],
    },
}

_SAMPLE_RESUMES: dict[Language, dict[str, Any]] = {
    Language.ENGLISH: {
        "name": "Alex Martin",
        "email": "alex.martin@example.com",
        "phone": "+1 555 010 2030",
        "summary": (
            "Our AI service is currently experiencing high load, so this example "
            "resume is shown instead of yours. Please try again in a few moments. "
            "Alex Martin is a software engineer with 6 years of experience "
            "building reliable web platforms."
        ),
        "experience": [
            {
                "title": "Senior Software Engineer",
                "company": "Northwind Labs",
                "period": "2021 - Present",
                "description": (
                    "• Led the migration of a monolithic billing system to services, "
                    "cutting deployment time by 60%\n"
                    "• Designed a caching layer that reduced API latency by 35%\n"
                    "• Mentored 4 engineers through code reviews and pairing sessions"
                ),
            },
            {
                "title": "Software Engineer",
                "company": "Blue Harbor Software",
                "period": "2018 - 2021",
                "description": (
                    "• Developed customer-facing dashboards used by 20,000 monthly users\n"
                    "• Automated the release pipeline, reducing manual steps by 80%\n"
                    "• Collaborated with product managers to ship 12 major features"
                ),
            },
        ],
        "education": [
            {
                "degree": "B.Sc. in Computer Science",
                "institution": "University of Example",
                "period": "2014 - 2018",
            }
        ],
        "certifications": [
            {
                "name": "Cloud Practitioner",
                "issuer": "Example Cloud Institute",
                "date": "2022",
            }
        ],
        "skills": ["Python", "TypeScript", "PostgreSQL", "Docker", "System Design"],
    },
    Language.FRENCH: {
        "name": "Alex Martin",
        "email": "alex.martin@exemple.com",
        "phone": "+33 6 12 34 56 78",
        "summary": (
            "Notre service d'IA est actuellement très sollicité : ce CV d'exemple "
            "est affiché à la place du vôtre. Veuillez réessayer dans quelques "
            "instants. Alex Martin est ingénieur logiciel avec 6 ans d'expérience "
            "dans la conception de plateformes web fiables."
        ),
        "experience": [
            {
                "title": "Ingénieur logiciel senior",
                "company": "Northwind Labs",
                "period": "2021 - Aujourd'hui",
                "description": (
                    "• Piloté la migration d'un système de facturation monolithique "
                    "vers des services, réduisant le temps de déploiement de 60 %\n"
                    "• Conçu une couche de cache réduisant la latence de l'API de 35 %\n"
                    "• Accompagné 4 ingénieurs par des revues de code et du binômage"
                ),
            },
            {
                "title": "Ingénieur logiciel",
                "company": "Blue Harbor Software",
                "period": "2018 - 2021",
                "description": (
                    "• Développé des tableaux de bord utilisés par 20 000 utilisateurs par mois\n"
                    "• Automatisé la chaîne de livraison, supprimant 80 % des étapes manuelles\n"
                    "• Collaboré avec les chefs de produit pour livrer 12 fonctionnalités majeures"
                ),
            },
        ],
        "education": [
            {
                "degree": "Licence en informatique",
                "institution": "Université Exemple",
                "period": "2014 - 2018",
            }
        ],
        "certifications": [
            {
                "name": "Cloud Practitioner",
                "issuer": "Example Cloud Institute",
                "date": "2022",
            }
        ],
        "skills": ["Python", "TypeScript", "PostgreSQL", "Docker", "Conception de systèmes"],
    },
}


def get_generic_resume(lang: Language) -> dict[str, Any]:
    """Return a copy of the neutral placeholder resume for `lang`."""
    return copy.deepcopy(_GENERIC_RESUMES[lang])


def get_sample_resume(lang: Language) -> dict[str, Any]:
    """Return a copy of the high-load example resume for `lang`."""
    return copy.deepcopy(_SAMPLE_RESUMES[lang])
