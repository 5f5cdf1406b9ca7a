"""Demo: simply supported floor beam + interior column — S16-19 selection."""

from s16design import (
    BeamDesignMode,
    ColumnDesignInputs,
    DesignInputs,
    LateralSupport,
    NBCLoads,
    SectionCapacityS16,
    configure_logging,
    derive_design_loads,
    load_catalog,
    search_optimal_beam,
    search_optimal_column,
)


def main():
    configure_logging()

    # ── Beam: 8 m span, NBC loads ─────────────────────────────────
    loads = derive_design_loads(
        BeamDesignMode.NBC,
        span=8000.0,                                # mm
        nbc=NBCLoads(D=12.0, L=18.0, S=4.0),        # kN/m
        deflection_limit=360,
    )
    print(f"Governing ULS: {loads.combinations.governing_uls.name} "
          f"= {loads.combinations.w_uls:.2f} kN/m")
    print(f"Mf = {loads.Mf:.1f} kNm   Vf = {loads.Vf:.1f} kN   "
          f"Ix,req = {loads.deflection.required_ix / 1e6:.1f}e6 mm⁴")

    inputs = DesignInputs(
        factored_moment=loads.Mf,
        factored_shear=loads.Vf,
        steel_grade="350W",
        lateral_support=LateralSupport.UNSUPPORTED,
        unbraced_length=2000.0,                     # mm — braced at quarter points
    )
    beams = search_optimal_beam(load_catalog("W"), inputs, loads.deflection)
    for r in beams[:5]:
        print(f"  {r.section.designation:<10} {r.section.mass:>6.1f} kg/m   "
              f"Mr = {r.Mr:>6.1f} kNm ({r.ltb_result.governing_case})   "
              f"util = {r.governing_utilization:.2f}")

    if beams:
        check = SectionCapacityS16(
            section=beams[0].section,
            steel_grade="350W",
            unbraced_length=2000.0,
            Mf=loads.Mf,
            Vf=loads.Vf,
        )
        check.check_all()
        check.print_summary()

    # ── Column: 1500 kN, 4 m storey ───────────────────────────────
    columns = search_optimal_column(
        load_catalog("W"),
        ColumnDesignInputs(factored_axial_load=1500.0, unbraced_length=4000.0),
    )
    for r in columns[:5]:
        print(f"  {r.section.designation:<10} {r.section.mass:>6.1f} kg/m   "
              f"Cr = {r.Cr:>7.1f} kN   KL/r = {r.buckling_result.slenderness:.0f}   "
              f"class {r.classification.overall_class}")


if __name__ == "__main__":
    main()
