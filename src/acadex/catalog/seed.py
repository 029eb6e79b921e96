"""Sample catalog data used to seed each session."""

from __future__ import annotations

from typing import Any

from .models import AcademicWork, Tag
from .store import Clock, WorkStore

DEFAULT_TAGS: tuple[Tag, ...] = (
    Tag(id="tag-1", name="Importante", color="hsl(0, 84%, 60%)"),
    Tag(id="tag-2", name="Final", color="hsl(210, 100%, 40%)"),
    Tag(id="tag-3", name="Parcial", color="hsl(38, 92%, 50%)"),
    Tag(id="tag-4", name="Grupal", color="hsl(142, 76%, 36%)"),
    Tag(id="tag-5", name="Individual", color="hsl(199, 89%, 48%)"),
    Tag(id="tag-6", name="Investigación", color="hsl(270, 70%, 50%)"),
)

SUBJECTS: tuple[str, ...] = (
    "Matemáticas",
    "Física",
    "Química",
    "Programación",
    "Base de Datos",
    "Estadística",
    "Economía",
    "Administración",
    "Inglés",
    "Historia",
    "Filosofía",
    "Comunicación",
)

PROFESSORS: tuple[str, ...] = (
    "Dr. García López",
    "Dra. Martínez Ruiz",
    "Ing. Rodríguez Paz",
    "Lic. Fernández Castro",
    "Mtro. Sánchez Mora",
    "Dra. López Herrera",
    "Ing. Pérez Gómez",
    "Dr. Ramírez Silva",
)

UNIVERSITIES: tuple[str, ...] = (
    "Universidad Nacional Autónoma de México",
    "Instituto Politécnico Nacional",
    "Universidad Autónoma Metropolitana",
    "Tecnológico de Monterrey",
    "Universidad de Guadalajara",
    "Universidad Iberoamericana",
    "Instituto Tecnológico Autónomo de México",
)

SEMESTERS: tuple[str, ...] = ("2024-1", "2024-2", "2023-1", "2023-2", "2022-1", "2022-2")

IMPORTANTE, FINAL, PARCIAL, GRUPAL, INDIVIDUAL, INVESTIGACION = DEFAULT_TAGS


def _work(
    work_id: str,
    name: str,
    subject: str,
    work_type: str,
    document_type: str,
    professor: str,
    university: str,
    semester: str,
    date: str,
    file_name: str,
    file_size: int,
    tags: tuple[Tag, ...],
    *,
    created_at: str,
    updated_at: str | None = None,
    is_template: bool = False,
    version: int = 1,
    description: str | None = None,
) -> AcademicWork:
    payload: dict[str, Any] = {
        "id": work_id,
        "name": name,
        "subject": subject,
        "work_type": work_type,
        "document_type": document_type,
        "professor": professor,
        "university": university,
        "semester": semester,
        "date": date,
        "file_name": file_name,
        "file_size": file_size,
        "tags": tags,
        "is_template": is_template,
        "version": version,
        "description": description,
        "created_at": created_at,
        "updated_at": updated_at or created_at,
    }
    return AcademicWork.model_validate(payload)


SEED_WORKS: tuple[AcademicWork, ...] = (
    _work(
        "1",
        "Análisis de Algoritmos de Ordenamiento",
        "Programación",
        "project",
        "pdf",
        "Ing. Rodríguez Paz",
        "Universidad Nacional Autónoma de México",
        "2024-2",
        "2024-11-15",
        "analisis_algoritmos_ordenamiento.pdf",
        2_500_000,
        (IMPORTANTE, GRUPAL),
        description="Proyecto final sobre comparación de algoritmos de ordenamiento",
        created_at="2024-11-15T10:30:00Z",
    ),
    _work(
        "2",
        "Informe de Laboratorio - Reacciones Químicas",
        "Química",
        "report",
        "word",
        "Dra. Martínez Ruiz",
        "Instituto Politécnico Nacional",
        "2024-2",
        "2024-11-10",
        "laboratorio_reacciones_quimicas.docx",
        1_800_000,
        (INDIVIDUAL,),
        is_template=True,
        version=3,
        description="Informe de laboratorio sobre reacciones químicas exotérmicas",
        created_at="2024-11-10T14:20:00Z",
        updated_at="2024-11-12T09:15:00Z",
    ),
    _work(
        "3",
        "Presentación - Historia del Arte Moderno",
        "Historia",
        "presentation",
        "powerpoint",
        "Dr. Ramírez Silva",
        "Tecnológico de Monterrey",
        "2024-2",
        "2024-11-08",
        "historia_arte_moderno.pptx",
        5_200_000,
        (GRUPAL, FINAL),
        created_at="2024-11-08T16:45:00Z",
    ),
    _work(
        "4",
        "Análisis Estadístico de Datos de Ventas",
        "Estadística",
        "project",
        "excel",
        "Lic. Fernández Castro",
        "Universidad Autónoma Metropolitana",
        "2024-2",
        "2024-11-05",
        "analisis_estadistico_ventas.xlsx",
        890_000,
        (IMPORTANTE, INVESTIGACION),
        version=2,
        created_at="2024-11-05T11:00:00Z",
        updated_at="2024-11-06T15:30:00Z",
    ),
    _work(
        "5",
        "Ensayo sobre Ética Profesional",
        "Filosofía",
        "essay",
        "pdf",
        "Dr. García López",
        "Universidad Iberoamericana",
        "2024-2",
        "2024-10-28",
        "ensayo_etica_profesional.pdf",
        450_000,
        (INDIVIDUAL,),
        is_template=True,
        created_at="2024-10-28T09:20:00Z",
    ),
    _work(
        "6",
        "Diseño de Base de Datos Relacional",
        "Base de Datos",
        "project",
        "pdf",
        "Ing. Pérez Gómez",
        "Instituto Tecnológico Autónomo de México",
        "2024-2",
        "2024-10-22",
        "diseno_bd_relacional.pdf",
        3_100_000,
        (IMPORTANTE, FINAL),
        created_at="2024-10-22T13:40:00Z",
    ),
    _work(
        "7",
        "Examen Parcial - Cálculo Diferencial",
        "Matemáticas",
        "exam",
        "pdf",
        "Dr. García López",
        "Universidad Nacional Autónoma de México",
        "2024-2",
        "2024-10-15",
        "examen_calculo_diferencial.pdf",
        680_000,
        (PARCIAL,),
        created_at="2024-10-15T08:00:00Z",
    ),
    _work(
        "8",
        "Tarea - Ejercicios de Física Mecánica",
        "Física",
        "homework",
        "word",
        "Dra. López Herrera",
        "Instituto Politécnico Nacional",
        "2024-2",
        "2024-10-10",
        "tarea_fisica_mecanica.docx",
        520_000,
        (INDIVIDUAL,),
        created_at="2024-10-10T17:30:00Z",
    ),
    _work(
        "9",
        "Informe Financiero Trimestral",
        "Economía",
        "report",
        "excel",
        "Mtro. Sánchez Mora",
        "Tecnológico de Monterrey",
        "2024-1",
        "2024-05-20",
        "informe_financiero_q1.xlsx",
        1_250_000,
        (GRUPAL, IMPORTANTE),
        is_template=True,
        version=2,
        created_at="2024-05-20T10:15:00Z",
        updated_at="2024-05-25T14:00:00Z",
    ),
    _work(
        "10",
        "Proyecto de Investigación - Marketing Digital",
        "Administración",
        "project",
        "powerpoint",
        "Lic. Fernández Castro",
        "Universidad de Guadalajara",
        "2024-1",
        "2024-05-15",
        "investigacion_marketing_digital.pptx",
        8_900_000,
        (INVESTIGACION, FINAL),
        created_at="2024-05-15T12:00:00Z",
    ),
    _work(
        "11",
        "Ensayo - Reading Comprehension",
        "Inglés",
        "essay",
        "word",
        "Dra. Martínez Ruiz",
        "Universidad Iberoamericana",
        "2024-1",
        "2024-04-28",
        "reading_comprehension_essay.docx",
        320_000,
        (INDIVIDUAL,),
        created_at="2024-04-28T09:45:00Z",
    ),
    _work(
        "12",
        "Presentación Final - Comunicación Organizacional",
        "Comunicación",
        "presentation",
        "powerpoint",
        "Mtro. Sánchez Mora",
        "Instituto Tecnológico Autónomo de México",
        "2024-1",
        "2024-04-20",
        "comunicacion_organizacional_final.pptx",
        6_700_000,
        (FINAL, GRUPAL),
        created_at="2024-04-20T15:30:00Z",
    ),
    _work(
        "13",
        "Informe de Práctica - Circuitos Eléctricos",
        "Física",
        "report",
        "pdf",
        "Dra. López Herrera",
        "Universidad Nacional Autónoma de México",
        "2023-2",
        "2023-11-25",
        "practica_circuitos_electricos.pdf",
        1_900_000,
        (INDIVIDUAL, INVESTIGACION),
        is_template=True,
        version=2,
        created_at="2023-11-25T11:20:00Z",
        updated_at="2023-12-01T10:00:00Z",
    ),
    _work(
        "14",
        "Proyecto Final - Sistema de Inventarios",
        "Programación",
        "project",
        "pdf",
        "Ing. Rodríguez Paz",
        "Instituto Politécnico Nacional",
        "2023-2",
        "2023-11-18",
        "sistema_inventarios_final.pdf",
        4_500_000,
        (IMPORTANTE, FINAL, GRUPAL),
        created_at="2023-11-18T16:00:00Z",
    ),
    _work(
        "15",
        "Examen Final - Álgebra Lineal",
        "Matemáticas",
        "exam",
        "pdf",
        "Dr. García López",
        "Tecnológico de Monterrey",
        "2023-2",
        "2023-12-05",
        "examen_algebra_lineal.pdf",
        750_000,
        (FINAL,),
        created_at="2023-12-05T08:30:00Z",
    ),
    _work(
        "16",
        "Tarea - Normalización de Bases de Datos",
        "Base de Datos",
        "homework",
        "word",
        "Ing. Pérez Gómez",
        "Universidad Autónoma Metropolitana",
        "2023-2",
        "2023-10-30",
        "tarea_normalizacion_bd.docx",
        420_000,
        (INDIVIDUAL,),
        created_at="2023-10-30T14:15:00Z",
    ),
    _work(
        "17",
        "Análisis de Costos de Producción",
        "Economía",
        "report",
        "excel",
        "Mtro. Sánchez Mora",
        "Universidad de Guadalajara",
        "2023-1",
        "2023-05-12",
        "analisis_costos_produccion.xlsx",
        980_000,
        (INVESTIGACION,),
        created_at="2023-05-12T10:00:00Z",
    ),
    _work(
        "18",
        "Ensayo Filosófico - Existencialismo",
        "Filosofía",
        "essay",
        "pdf",
        "Dr. García López",
        "Universidad Iberoamericana",
        "2023-1",
        "2023-04-25",
        "ensayo_existencialismo.pdf",
        380_000,
        (INDIVIDUAL, IMPORTANTE),
        created_at="2023-04-25T09:00:00Z",
    ),
    _work(
        "19",
        "Presentación - Tabla Periódica Interactiva",
        "Química",
        "presentation",
        "powerpoint",
        "Dra. Martínez Ruiz",
        "Instituto Tecnológico Autónomo de México",
        "2023-1",
        "2023-03-18",
        "tabla_periodica_interactiva.pptx",
        12_500_000,
        (GRUPAL, INVESTIGACION),
        created_at="2023-03-18T13:45:00Z",
    ),
    _work(
        "20",
        "Proyecto - Aplicación Web con React",
        "Programación",
        "project",
        "pdf",
        "Ing. Rodríguez Paz",
        "Universidad Nacional Autónoma de México",
        "2023-1",
        "2023-05-30",
        "proyecto_react_webapp.pdf",
        5_800_000,
        (IMPORTANTE, FINAL, GRUPAL),
        is_template=True,
        version=4,
        description="Documentación completa del proyecto de aplicación web con React",
        created_at="2023-05-30T17:00:00Z",
        updated_at="2024-02-15T11:30:00Z",
    ),
)


def seeded_store(*, strict: bool = False, clock: Clock | None = None) -> WorkStore:
    """Return a fresh store populated with the sample catalog.

    Args:
        strict: Forwarded to :class:`WorkStore`.
        clock: Forwarded to :class:`WorkStore`.

    Returns:
        WorkStore: Store owning its own copy of the seed collections.
    """

    return WorkStore(
        SEED_WORKS,
        tags=DEFAULT_TAGS,
        subjects=SUBJECTS,
        professors=PROFESSORS,
        universities=UNIVERSITIES,
        strict=strict,
        clock=clock,
    )


__all__ = [
    "DEFAULT_TAGS",
    "SUBJECTS",
    "PROFESSORS",
    "UNIVERSITIES",
    "SEMESTERS",
    "SEED_WORKS",
    "seeded_store",
]
