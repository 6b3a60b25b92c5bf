# seed.py
# Fixed starting dataset: category tree, Fighter guides and a couple of tips.

import structlog

from models import CategoryCreate, GuideCreate, TipCreate
from stores import GuideStore

logger = structlog.get_logger("seed")

PATCH_LABEL = "Patch 5"


FIGHTER_CLASS_GUIDE = """
# Fighter Class Overview

Fighters win fights with better weapons, better armor and better positioning.
They handle everything from two-handed weapons to sword and board, and in
Baldur's Gate 3 they make dependable frontliners who soak up hits and deal
steady damage every turn.

## Fighter Class Stats

- **Hit Dice**: d10
- **Primary Ability**: Strength or Dexterity
- **Saving Throws**: Strength, Constitution
- **Armor Proficiency**: All armor, shields
- **Weapon Proficiency**: Simple and martial weapons

## Key Fighter Features

### Fighting Style
At level 1 you pick a fighting style: Archery, Defense, Dueling, Great Weapon
Fighting, Protection or Two-Weapon Fighting.

### Second Wind
A bonus action that restores 1d10 + fighter level hit points. Recharges on a
short or long rest.

### Action Surge
From level 2 you can take one extra action on your turn. Recharges on a short
or long rest.

## Recommended Ability Scores

- **Strength**: 16 for melee builds
- **Dexterity**: 14-16 for armor class and ranged attacks
- **Constitution**: 14-16 for hit points and concentration
- **Intelligence**: 8-10 (raise it for Eldritch Knight)

## Pro Tips

- **Hold the line**: stand between the enemy and your squishier allies.
- **Bank Action Surge** for the turn that decides the fight.
- **Use the terrain**: high ground gives you a bonus to ranged attacks.
"""

BATTLE_MASTER_GUIDE = """
# Battle Master Fighter Guide

The Battle Master spends superiority dice on maneuvers that control the
battlefield, add damage or protect allies.

## Key Features

- **Combat Superiority**: a pool of superiority dice that fuels maneuvers.
- **Maneuvers**: three at level 3, more as you level.

## Best Maneuvers

1. **Menacing Attack**: frightens the target so it cannot close in.
2. **Trip Attack**: knocks the target prone for your melee allies.
3. **Riposte**: strike back when an enemy misses you.
4. **Precision Attack**: add the die to an attack roll that just missed.

## Recommended Builds

### Battlefield Controller
Shield plus a one-handed weapon, with maneuvers that lock enemies in place.

### Damage Dealer
A two-handed weapon and every damage-adding maneuver you can find.
"""

ELDRITCH_KNIGHT_GUIDE = """
# Eldritch Knight Guide

The Eldritch Knight mixes martial training with wizard spells, mostly from
the Abjuration and Evocation schools.

## Key Features

- **Spellcasting**: wizard spells with Intelligence as the casting stat.
- **Weapon Bond**: summon a bonded weapon to your hand as a bonus action.
- **War Magic**: from level 7, cast a cantrip and attack as a bonus action.

## Recommended Spells

### Cantrips
- **Booming Blade**: punishes enemies that try to walk away.
- **Blade Ward**: cuts incoming weapon damage.

### 1st Level
- **Shield**: +5 armor class as a reaction.
- **Magic Missile**: damage that never misses.

## Ability Score Priorities

1. **Strength/Dexterity** for attacks.
2. **Intelligence** for spells.
3. **Constitution** for concentration.
"""

FIGHTER_WEAPONS_GUIDE = """
# Best Fighter Weapons in Baldur's Gate 3

Where to find the strongest weapons for a Fighter, sorted by weapon type.

## One-Handed Weapons

### Swords
1. **The Watcher**: +1 longsword with advantage on Perception. Blighted Village.
2. **Bloodthirst**: +2 shortsword with bonus necrotic damage. Act 2.

## Two-Handed Weapons

### Greatswords
1. **Faithbreaker**: +2 greatsword. Underdark.

### Polearms
1. **Spear of Night**: +1 halberd that grants darkvision. Underdark.

## Ranged Weapons

### Bows
1. **Longbow of the Seldarine**: +2 longbow with radiant damage. Act 3.

## Best Weapons By Build

- **Tank**: a shield with The Watcher.
- **Two-Handed**: Faithbreaker.
- **Ranged**: Longbow of the Seldarine.
"""


ROOT_CATEGORIES = [
    CategoryCreate(name="Classes", slug="classes",
                   description="Character classes available in Baldur's Gate 3", icon="sword"),
    CategoryCreate(name="Companions", slug="companions",
                   description="Companions who can join your party in Baldur's Gate 3", icon="character"),
    CategoryCreate(name="Quests", slug="quests",
                   description="Main and side quests in Baldur's Gate 3", icon="quest"),
    CategoryCreate(name="Items & Equipment", slug="items-equipment",
                   description="Items, weapons, armor and magical artifacts in Baldur's Gate 3", icon="shield"),
    CategoryCreate(name="Mechanics", slug="mechanics",
                   description="Game mechanics and systems in Baldur's Gate 3", icon="spell"),
]

# parent slug -> [(name, slug)]
SUBCATEGORIES = {
    "classes": [("Fighter", "fighter"), ("Wizard", "wizard"), ("Rogue", "rogue")],
    "companions": [("Shadowheart", "shadowheart"), ("Astarion", "astarion"), ("Gale", "gale")],
}

# (title, slug, excerpt, content, image, tags) -- all filed under Fighter
FIGHTER_GUIDES = [
    (
        "Fighter Class Guide",
        "fighter-class-guide",
        "Masters of martial combat, fighters are skilled with many weapons and armor types.",
        FIGHTER_CLASS_GUIDE,
        "https://images.unsplash.com/photo-1595327656903-2f54e37ce09b?auto=format&fit=crop&w=800&q=80",
        ["Melee Combat", "Heavy Armor", "Battle Master", "Eldritch Knight", "Champion"],
    ),
    (
        "Battle Master Fighter Guide",
        "battle-master-fighter-guide",
        "Master combat maneuvers with the Battle Master. Learn the best tactics and builds.",
        BATTLE_MASTER_GUIDE,
        "https://images.unsplash.com/photo-1612870946687-066929736e99?auto=format&fit=crop&w=600&q=80",
        ["Fighter", "Battle Master", "Combat Maneuvers", "Tactics"],
    ),
    (
        "Eldritch Knight Guide",
        "eldritch-knight-guide",
        "Combine fighter combat abilities with wizard spells for a devastating hybrid.",
        ELDRITCH_KNIGHT_GUIDE,
        "https://images.unsplash.com/photo-1594380404522-8e7e41d63fa4?auto=format&fit=crop&w=600&q=80",
        ["Fighter", "Eldritch Knight", "Spellcasting", "Magic"],
    ),
    (
        "Best Fighter Weapons in BG3",
        "best-fighter-weapons-bg3",
        "From legendary swords to enchanted hammers, find the best weapons for your Fighter.",
        FIGHTER_WEAPONS_GUIDE,
        "https://images.unsplash.com/photo-1586788224331-947f68671cf1?auto=format&fit=crop&w=600&q=80",
        ["Fighter", "Weapons", "Equipment", "Loot"],
    ),
]

# (author, content, helpful_count) -- attached to the first guide
FIGHTER_TIPS = [
    (
        "TavernWanderer",
        "For Battle Masters, Menacing Attack is amazing for crowd control. Frightened enemies "
        "can't move closer, so your ranged party members get free attacks.",
        18,
    ),
    (
        "DungeonMaster42",
        "Don't underestimate high ground! Put your Fighter on elevated terrain for the attack "
        "bonus, it adds up fast with Action Surge.",
        11,
    ),
]


def seed_store(store: GuideStore) -> None:
    """Insert the starting dataset into an empty store."""
    roots = {c.slug: store.create_category(c) for c in ROOT_CATEGORIES}

    subcategories = {}
    for parent_slug, children in SUBCATEGORIES.items():
        parent = roots[parent_slug]
        for name, slug in children:
            kind = "class" if parent_slug == "classes" else "companion"
            subcategories[slug] = store.create_category(CategoryCreate(
                name=name,
                slug=slug,
                parent_id=parent.id,
                description=f"Guides for the {name} {kind} in Baldur's Gate 3",
            ))

    fighter = subcategories["fighter"]
    guides = [
        store.create_guide(GuideCreate(
            title=title,
            slug=slug,
            excerpt=excerpt,
            content=content,
            category_id=fighter.id,
            featured_image=image,
            tags=tags,
            patch=PATCH_LABEL,
        ))
        for title, slug, excerpt, content, image, tags in FIGHTER_GUIDES
    ]

    for author, content, helpful in FIGHTER_TIPS:
        store.create_tip(TipCreate(guide_id=guides[0].id, author=author, content=content), helpful_count=helpful)

    logger.info(
        "store_seeded",
        categories=len(roots) + len(subcategories),
        guides=len(guides),
        tips=len(FIGHTER_TIPS),
    )


def build_store(strict: bool = False) -> GuideStore:
    """Fresh store with the starting dataset loaded."""
    store = GuideStore(strict=strict)
    seed_store(store)
    return store
