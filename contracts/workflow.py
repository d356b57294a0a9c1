"""
Checklist de trabajo de cada contrato.

El workflow es una lista de categorías, cada una con sus tareas:

    [{"id": "...", "name": "Edición", "tasks": [
        {"id": "...", "title": "Seleccionar fotos", "done": False, "due": None, "note": ""},
    ]}]

Las funciones devuelven copias nuevas; nunca modifican la lista recibida.
"""
import copy
import unicodedata
import uuid

DELIVERY_CATEGORY = "Entrega de productos"
DELIVERY_KEYWORD = "entrega"


def new_id() -> str:
    return uuid.uuid4().hex[:12]


def normalize(text) -> str:
    """Minúsculas, sin acentos ni espacios en los extremos."""
    decomposed = unicodedata.normalize("NFD", str(text or ""))
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).lower().strip()


def ensure_delivery_tasks(workflow, store_items) -> list:
    """
    Agrega una tarea "Entregar <producto>" por cada producto de la tienda.

    Las tareas van a la primera categoría cuyo nombre contenga "entrega"
    (sin importar acentos ni mayúsculas); si no hay ninguna se crea
    "Entrega de productos" al final. No se repiten títulos ya presentes.
    """
    merged = copy.deepcopy(list(workflow or []))
    category = next(
        (cat for cat in merged if DELIVERY_KEYWORD in normalize(cat.get("name"))),
        None,
    )
    if category is None:
        category = {"id": new_id(), "name": DELIVERY_CATEGORY, "tasks": []}
        merged.append(category)

    tasks = category.setdefault("tasks", [])
    for item in store_items or []:
        name = item.get("name") if isinstance(item, dict) else None
        title = f"Entregar {name or ''}"
        if any(normalize(task.get("title")) == normalize(title) for task in tasks):
            continue
        tasks.append({"id": new_id(), "title": title, "done": False})
    return merged


def apply_template(template) -> list:
    """Copia las categorías de una plantilla con todas las tareas sin hacer."""
    categories = template.get("categories", []) if isinstance(template, dict) else template
    cloned = []
    for cat in categories or []:
        cloned.append({
            "id": cat.get("id") or new_id(),
            "name": cat.get("name", ""),
            "tasks": [
                {**task, "id": task.get("id") or new_id(), "done": False}
                for task in cat.get("tasks", [])
            ],
        })
    return cloned


def progress(workflow) -> tuple:
    """(tareas hechas, tareas totales)."""
    tasks = [task for cat in workflow or [] for task in cat.get("tasks", [])]
    return sum(1 for task in tasks if task.get("done")), len(tasks)
