"""The table of item attribute codes known to the generator."""

from __future__ import annotations

from d2modgen.attribute_kinds import AttributeDesc
from d2modgen.attribute_kinds import AttributeFlag as F
from d2modgen.attribute_kinds import AttributeItemReq as R


def _a(code: str, *flags: F, items: tuple[R, ...] = ()) -> AttributeDesc:
    return AttributeDesc(code, frozenset(flags), frozenset(items))


_ATTRIBUTES: tuple[AttributeDesc, ...] = (
    _a("ac", F.DEFENSE),  # +# Defense
    _a("ac-miss", F.DEFENSE),  # +# Defense vs. Missile
    _a("ac-hth", F.DEFENSE),  # +# Defense vs. Melee
    _a("red-dmg", F.DAMAGE_REDUCTION),  # Damage Reduced by #
    _a("red-dmg%", F.RESISTANCE),  # Damage Reduced by #%
    _a("ac%", F.DEFENSE),  # +#% Enhanced Defense
    _a("red-mag", F.DAMAGE_REDUCTION),  # Magic Damage Reduced by #
    _a("str", F.STATS),
    _a("dex", F.STATS),
    _a("vit", F.STATS),
    _a("enr", F.STATS),
    _a("mana", F.STATS),
    _a("mana%", F.STATS),
    _a("hp", F.STATS),
    _a("hp%", F.STATS),
    _a("att", F.ATTACK),
    _a("block", items=(R.SHIELD,)),  # #% Increased Chance of Blocking
    _a("cold-min", F.DAMAGE),
    _a("cold-max", F.DAMAGE),
    _a("cold-len", F.DAMAGE),
    _a("fire-min", F.DAMAGE),
    _a("fire-max", F.DAMAGE),
    _a("ltng-min", F.DAMAGE),
    _a("ltng-max", F.DAMAGE),
    _a("pois-min", F.DAMAGE),
    _a("pois-max", F.DAMAGE),
    _a("pois-len", F.DAMAGE),
    _a("dmg-min", F.DAMAGE),
    _a("dmg-max", F.DAMAGE),
    _a("dmg%", F.DAMAGE),
    _a("dmg-to-mana"),
    _a("res-fire", F.RESISTANCE),
    _a("res-fire-max", F.RESISTANCE),
    _a("res-ltng", F.RESISTANCE),
    _a("res-ltng-max", F.RESISTANCE),
    _a("res-cold", F.RESISTANCE),
    _a("res-cold-max", F.RESISTANCE),
    _a("res-mag", F.RESISTANCE),
    _a("res-mag-max", F.RESISTANCE),
    _a("res-pois", F.RESISTANCE),
    _a("res-pois-max", F.RESISTANCE),
    _a("res-all", F.RESISTANCE),
    _a("res-all-max", F.RESISTANCE),
    _a("abs-fire%", F.RESISTANCE),
    _a("abs-fire", F.DAMAGE_REDUCTION),
    _a("abs-ltng%", F.RESISTANCE),
    _a("abs-ltng", F.DAMAGE_REDUCTION),
    _a("abs-mag%", F.RESISTANCE),
    _a("abs-mag", F.DAMAGE_REDUCTION),
    _a("abs-cold%", F.RESISTANCE),
    _a("abs-cold", F.DAMAGE_REDUCTION),
    _a("dur", F.DURABILITY),
    _a("dur%", F.DURABILITY),
    _a("regen"),
    _a("thorns"),
    _a("swing1", F.SPEED),
    _a("swing2", F.SPEED),
    _a("swing3", F.SPEED),
    _a("gold%"),
    _a("mag%"),
    _a("knock", items=(R.WEAPON,)),
    _a("regen-stam"),
    _a("regen-mana"),
    _a("stam"),
    _a("manasteal", F.LEECH),
    _a("lifesteal", F.LEECH),
    _a("ama", F.SKILLS),
    _a("pal", F.SKILLS),
    _a("nec", F.SKILLS),
    _a("sor", F.SKILLS),
    _a("bar", F.SKILLS),
    _a("light"),
    _a("ease", items=(R.WEAPON, R.ARMOR)),  # Requirements -#%
    _a("move1", F.SPEED),
    _a("move2", F.SPEED),
    _a("move3", F.SPEED),
    _a("balance1", F.SPEED),
    _a("balance2", F.SPEED),
    _a("balance3", F.SPEED),
    _a("block1", F.SPEED),
    _a("block2", F.SPEED),
    _a("block3", F.SPEED),
    _a("cast1", F.SPEED),
    _a("cast2", F.SPEED),
    _a("cast3", F.SPEED),
    _a("res-pois-len", F.RESISTANCE),
    _a("dmg", F.DAMAGE),
    _a("howl"),
    _a("stupidity"),
    _a("ignore-ac", F.ATTACK),
    _a("reduce-ac", F.ATTACK),
    _a("noheal"),
    _a("half-freeze"),
    _a("att%", F.ATTACK),
    _a("dmg-ac", F.ATTACK),
    _a("dmg-demon", F.DAMAGE),
    _a("dmg-undead", F.DAMAGE),
    _a("att-demon", F.ATTACK),
    _a("att-undead", F.ATTACK),
    _a("fireskill", F.SKILLS),
    _a("poisskill", F.SKILLS),
    _a("coldskill", F.SKILLS),
    _a("magskill", F.SKILLS),
    _a("ltngskill", F.SKILLS),
    _a("allskills", F.SKILLS),
    _a("light-thorns"),
    _a("freeze"),
    _a("openwounds"),
    _a("crush", F.OP),
    _a("kick", F.DAMAGE),
    _a("mana-kill"),
    _a("demon-heal"),
    _a("bloody"),
    _a("deadly", F.DAMAGE),
    _a("slow"),
    _a("nofreeze", F.OP),
    _a("stamdrain"),
    _a("reanimate"),
    _a("pierce", F.MISSILE, F.QUANTITY),
    _a("magicarrow", F.MISSILE),
    _a("explosivearrow", F.MISSILE),
    _a("dru", F.SKILLS),
    _a("ass", F.SKILLS),
    _a("skill", F.SKILLS),
    _a("skilltab", F.SKILLS),
    _a("aura"),
    _a("att-skill", F.NO_MIN_MAX),
    _a("hit-skill", F.NO_MIN_MAX),
    _a("gethit-skill", F.NO_MIN_MAX),
    _a("sock", F.SOCKETS),
    _a("dmg-fire", F.DAMAGE),
    _a("dmg-ltng", F.DAMAGE),
    _a("dmg-mag", F.DAMAGE),
    _a("dmg-cold", F.DAMAGE),
    _a("dmg-pois", F.DAMAGE),
    _a("dmg-norm", F.DAMAGE),
    _a("ac/lvl", F.PER_LEVEL, F.DEFENSE),
    _a("ac%/lvl", F.PER_LEVEL, F.DEFENSE),
    _a("hp/lvl", F.PER_LEVEL, F.STATS),
    _a("mana/lvl", F.PER_LEVEL, F.STATS),
    _a("dmg/lvl", F.PER_LEVEL, F.DAMAGE),
    _a("dmg%/lvl", F.PER_LEVEL, F.DAMAGE),
    _a("str/lvl", F.PER_LEVEL, F.STATS),
    _a("dex/lvl", F.PER_LEVEL, F.STATS),
    _a("enr/lvl", F.PER_LEVEL, F.STATS),
    _a("vit/lvl", F.PER_LEVEL, F.STATS),
    _a("att/lvl", F.PER_LEVEL, F.ATTACK),
    _a("att%/lvl", F.PER_LEVEL, F.ATTACK),
    _a("dmg-cold/lvl", F.PER_LEVEL, F.DAMAGE),
    _a("dmg-fire/lvl", F.PER_LEVEL, F.DAMAGE),
    _a("dmg-ltng/lvl", F.PER_LEVEL, F.DAMAGE),
    _a("dmg-pois/lvl", F.PER_LEVEL, F.DAMAGE),
    _a("res-cold/lvl", F.PER_LEVEL, F.RESISTANCE),
    _a("res-fire/lvl", F.PER_LEVEL, F.RESISTANCE),
    _a("res-ltng/lvl", F.PER_LEVEL, F.RESISTANCE),
    _a("res-pois/lvl", F.PER_LEVEL, F.RESISTANCE),
    _a("abs-cold/lvl", F.PER_LEVEL, F.DAMAGE_REDUCTION),
    _a("abs-fire/lvl", F.PER_LEVEL, F.DAMAGE_REDUCTION),
    _a("abs-ltng/lvl", F.PER_LEVEL, F.DAMAGE_REDUCTION),
    _a("abs-pois/lvl", F.PER_LEVEL, F.DAMAGE_REDUCTION),
    _a("thorns/lvl", F.PER_LEVEL),
    _a("gold%/lvl", F.PER_LEVEL),
    _a("mag%/lvl", F.PER_LEVEL),
    _a("regen-stam/lvl", F.PER_LEVEL),
    _a("stam/lvl", F.PER_LEVEL),
    _a("dmg-dem/lvl", F.PER_LEVEL, F.DAMAGE),
    _a("dmg-und/lvl", F.PER_LEVEL, F.DAMAGE),
    _a("att-dem/lvl", F.PER_LEVEL, F.ATTACK),
    _a("att-und/lvl", F.PER_LEVEL, F.ATTACK),
    _a("crush/lvl", F.PER_LEVEL, F.OP),
    _a("wounds/lvl", F.PER_LEVEL),
    _a("kick/lvl", F.PER_LEVEL, F.DAMAGE),
    _a("deadly/lvl", F.PER_LEVEL, F.DAMAGE),
    _a("rep-dur", F.DURABILITY, F.NO_MIN_MAX),
    _a("rep-quant", F.QUANTITY, F.NO_MIN_MAX),
    _a("stack", F.QUANTITY),
    _a("pierce-fire"),
    _a("pierce-ltng"),
    _a("pierce-cold"),
    _a("pierce-pois"),
    _a("indestruct", F.DURABILITY),
    _a("charged", F.NO_MIN_MAX),
    _a("extra-fire"),
    _a("extra-ltng"),
    _a("extra-cold"),
    _a("extra-pois"),
    _a("dmg-elem", F.DAMAGE),
    _a("dmg-elem-min", F.DAMAGE),
    _a("dmg-elem-max", F.DAMAGE),
    _a("all-stats", F.STATS),
    _a("addxp", F.OP),
    _a("heal-kill"),
    _a("cheap"),
    _a("rip"),
    _a("att-mon%", F.ATTACK),
    _a("dmg-mon%", F.DAMAGE),
    _a("kill-skill", F.NO_MIN_MAX),
    _a("death-skill", F.NO_MIN_MAX),
    _a("levelup-skill", F.NO_MIN_MAX),
    _a("skill-rand", F.SKILLS, F.NO_MIN_MAX),
    _a("fade"),
    _a("levelreq"),
    _a("ethereal", F.DURABILITY),
    _a("oskill", F.SKILLS),
    _a("state"),
    _a("randclassskill", F.SKILLS, F.NO_MIN_MAX),
    _a("map-glob-monsterrarity", F.PD2_MAP),
    _a("map-mon-extra-fire", F.PD2_MAP),
    _a("map-glob-density", F.PD2_MAP),
    _a("map-play-addxp", F.PD2_MAP),
    _a("map-mon-extra-cold", F.PD2_MAP),
    _a("map-play-mag-gold%", F.PD2_MAP),
    _a("map-mon-extra-ltng", F.PD2_MAP),
    _a("map-mon-extra-pois", F.PD2_MAP),
    _a("map-mon-extra-mag", F.PD2_MAP),
    _a("map-glob-arealevel", F.PD2_MAP),
    _a("map-mon-att-pierce", F.PD2_MAP),
    _a("map-mon-att-cast-speed", F.PD2_MAP),
    _a("map-mon-hp%", F.PD2_MAP),
    _a("map-mon-ed%", F.PD2_MAP),
    _a("map-mon-splash", F.PD2_MAP),
    _a("map-mon-openwounds", F.PD2_MAP),
    _a("map-play-regen", F.PD2_MAP),
    _a("map-mon-crush", F.PD2_MAP),
    _a("map-mon-phys-as-extra-ltng", F.PD2_MAP),
    _a("map-mon-phys-as-extra-cold", F.PD2_MAP),
    _a("map-mon-phys-as-extra-fire", F.PD2_MAP),
    _a("map-mon-phys-as-extra-pois", F.PD2_MAP),
    _a("map-mon-phys-as-extra-mag", F.PD2_MAP),
    _a("map-glob-add-mon-doll", F.PD2_MAP),
    _a("map-glob-add-mon-succ", F.PD2_MAP),
    _a("map-glob-add-mon-vamp", F.PD2_MAP),
    _a("map-glob-add-mon-cow", F.PD2_MAP),
    _a("map-glob-add-mon-horde", F.PD2_MAP),
    _a("map-glob-add-mon-ghost", F.PD2_MAP),
    _a("map-glob-add-mon-souls", F.PD2_MAP),
    _a("map-glob-add-mon-fetish", F.PD2_MAP),
    _a("map-mon-ac%", F.PD2_MAP),
    _a("map-mon-abs-fire%", F.PD2_MAP),
    _a("map-mon-abs-ltng%", F.PD2_MAP),
    _a("map-mon-abs-mag%", F.PD2_MAP),
    _a("map-mon-abs-cold%", F.PD2_MAP),
    _a("map-mon-red-dmg", F.PD2_MAP),
    _a("map-mon-velocity%", F.PD2_MAP),
    _a("map-mon-regen", F.PD2_MAP),
    _a("map-mon-lifesteal-hp%", F.PD2_MAP),
    _a("map-mon-balance1", F.PD2_MAP),
    _a("map-play-balance1", F.PD2_MAP),
    _a("map-play-lightradius", F.PD2_MAP),
    _a("map-mon-curseresist-hp%", F.PD2_MAP),
    _a("map-play-res-all", F.PD2_MAP),
    _a("map-play-ac%", F.PD2_MAP),
    _a("map-play-block", F.PD2_MAP),
    _a("inc-splash-radius"),
    _a("leapspeed"),
    _a("blood-warp-life-reduction"),
    _a("extra-skele-war"),
    _a("extra-skele-mage"),
    _a("heal-hit"),
    _a("rep-charge"),
    _a("grims-extra-skele-mage"),
    _a("cast", F.SPEED),
    _a("inc_splash_radius"),
    _a("ias-frw"),
    _a("pierce-phys"),
    _a("extra-spirits"),
    _a("joust-reduction"),
    _a("maxcurse"),
    _a("extra-revives"),
    _a("curse-res"),
    _a("randclassskill2"),
    _a("randclassskill1"),
    _a("gust-reduction"),
    _a("dclone-clout"),
    _a("maxlevel-clout"),
    _a("dev-clout"),
    _a("socketed-text"),
    _a("silence-fhr-ias"),
    _a("extra-hydra"),
    _a("extra-valk"),
    _a("extra-magi"),
    _a("plague-fcr-pierce"),
    _a("infinityspeed"),
    _a("extra-golem"),
    _a("mana-steal"),
    _a("Light"),
    _a("Thorns"),
)


def base_attributes() -> tuple[AttributeDesc, ...]:
    """Return every known attribute description, in table order."""
    return _ATTRIBUTES