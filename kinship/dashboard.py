"""
Dashboard composition: contacts in, render-ready rows out.

Two screens, two independent positioning families:

    build_dashboard      floating balls around the heading
                         (radial placement + drift motion)
    build_sorting_scene  chips inside the three category circles
                         (region layout + force simulation)

No math lives here. Only wiring between the compute packages.
"""

import datetime as dt
import logging
from typing import Any, Dict, List, Optional, Sequence

from drift import motion_for
from forces import render_offset, simulate
from radial import place_radially
from regions import compute_regions

from kinship.board import category_color
from kinship.config import merge_config
from kinship.contacts import Contact, describe_contact, to_entity

logger = logging.getLogger(__name__)


def build_dashboard(
    width: float,
    height: float,
    contacts: Sequence[Contact],
    config: Optional[Dict[str, Any]] = None,
    today: Optional[dt.date] = None,
) -> List[Dict[str, Any]]:
    """
    One row per contact: ball geometry, dashboard copy, drift loop.

    `config` is a full kinship config (see kinship.config.load_config);
    None uses the defaults.
    """
    cfg = config if config is not None else merge_config(None)
    entities = [to_entity(c) for c in contacts]
    nodes = place_radially(width, height, entities, config=cfg['radial'])

    rows = []
    for contact, node in zip(contacts, nodes):
        context, cta = describe_contact(contact, today)
        motion = motion_for(node.id, node.x, node.y)
        rows.append({
            'id': str(node.id),
            'name': contact.name,
            'urgency': contact.urgency_level,
            'radius': node.radius,
            'x': node.x,
            'y': node.y,
            'fallback': node.fallback,
            'context': context,
            'cta_text': cta,
            'duration': motion.duration,
            'delay': motion.delay,
            'path_x': motion.path_x,
            'path_y': motion.path_y,
        })

    n_fallback = sum(r['fallback'] for r in rows)
    if n_fallback:
        logger.warning(f"{n_fallback}/{len(rows)} balls used fallback placement")
    return rows


def build_sorting_scene(
    width: float,
    height: float,
    contacts: Sequence[Contact],
    seed: Optional[int] = None,
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Region circles plus one chip row per categorized contact.

    Uncategorized contacts are listed under 'tray' and not simulated.
    """
    cfg = config if config is not None else merge_config(None)
    if seed is None:
        seed = cfg['dashboard']['simulation_seed']

    layout = compute_regions(width, height, config=cfg['regions'])
    entities = [to_entity(c) for c in contacts]
    placed = simulate(entities, layout, seed=seed, config=cfg['forces'])

    render = cfg['forces']['render']
    chips = []
    for entity in placed:
        left, top = render_offset(entity, layout, render['half_width'], render['half_height'])
        chips.append({
            'id': str(entity.id),
            'name': entity.label,
            'categories': '+'.join(sorted(entity.regions)),
            'color': category_color(entity.regions),
            'x': entity.position[0],
            'y': entity.position[1],
            'left': left,
            'top': top,
        })

    return {
        'layout': layout.to_dict(),
        'chips': chips,
        'tray': [str(e.id) for e in entities if not e.regions],
    }
