# building_info_function.py

def generate_configurations(raw_config):
    """Generate a full ELF analysis configuration from sampled building parameters."""

    # Extract parameters
    n_stories = raw_config["number_of_stories"]
    story_height = raw_config.get("story_height_m", 3.5)
    plan_length = raw_config["plan_length_m"]
    plan_width = raw_config["plan_width_m"]
    occupancy = raw_config.get("occupancy", "office")
    fc = raw_config.get("concrete_fc_mpa", 25)

    # Live load by occupancy (kg/m²)
    occupancy_to_live_load = {
        "residential": 200,
        "office": 250,
        "school": 250,
        "retail": 400,
        "storage": 600,
    }
    if occupancy not in occupancy_to_live_load:
        raise ValueError(
            f"occupancy must be one of {sorted(occupancy_to_live_load)}, got {occupancy!r}"
        )

    # Importance factor by risk category
    risk_category_to_importance = {
        "I": 1.0,
        "II": 1.0,
        "III": 1.25,
        "IV": 1.5,
    }
    risk_category = raw_config.get("risk_category", "II")
    if risk_category not in risk_category_to_importance:
        raise ValueError(
            f"risk_category must be one of {sorted(risk_category_to_importance)}, got {risk_category!r}"
        )

    config = {
        "seismic": {
            "ss": raw_config["ss"],
            "s1": raw_config["s1"],
            "site_class": raw_config.get("site_class", "SD"),
            # Special RC moment frame
            "r": raw_config.get("r", 8.0),
            "importance": risk_category_to_importance[risk_category],
        },

        "geometry": {
            "length": plan_length,
            "width": plan_width,
            "number_of_floors": n_stories,
            "height_per_floor": story_height,
        },

        "loads": {
            # 120 mm slab plus finishes
            "dead_load": raw_config.get("dead_load", 400),
            "partition_load": raw_config.get("partition_load", 100),
            "live_load": occupancy_to_live_load[occupancy],
        },

        "materials": {
            "fc": fc,
        },

        "analysis": {
            "analytical_period": raw_config.get("analytical_period"),
        },
    }

    return config
