"""SAXS Calculator - planning and analysis helpers for biological SAXS.

Pure calculations for SAXS and SEC-SAXS experiments on proteins, with
calibration tables shipped as JSON.

Example workflow:
    1. Analyze the protein sequence (MW, dry volume, vbar, extinction)
    2. Predict I(0), Rg and Dmax and pick a sample-detector distance
    3. Plan the SEC column run (retention time, dilution)
    4. Derive HPLC-SAXS flow, fraction and detector settings from a pre-run
    5. Fit the measured curve (Guinier) and fill the IUCr summary table

Quick start:
    from saxs_calculator import analyze_protein, calculate_detector_distance
    protein = analyze_protein("MKWVTFISLLLLFSSAYS")
    rec = calculate_detector_distance(protein.molecular_weight, "mw")

HPLC-SAXS settings:
    from saxs_calculator import calculate_hplc_saxs_settings, export_schedule_to_excel

    result = calculate_hplc_saxs_settings(
        peak_center=10.937,
        peak_fwhm=1,
        injection_volume=100,
        target_flow_rate=0.35,
        initial_flow_rate=0.35,
    )
    export_schedule_to_excel(result, "hplc_saxs_settings.xlsx")

Session with tagged outcomes:
    from saxs_calculator import CalculatorSession

    session = CalculatorSession()
    session.analyze_protein(sequence, name="BSA")
    session.record_saxs_measurement(concentration=2.0, xray_energy=12.4, rg_guinier=28.1)
    table = session.iucr_table()
"""

from .core import (
    # Errors
    CalculationError,
    SequenceError,
    InsufficientDataError,
    DomainError,
    MissingParameterError,
    # Types
    ProteinType,
    ParticleShape,
    CalculationOutcome,
    # Rounding
    round_fixed,
    round_half_up,
)

from .configs import (
    get_amino_acid_table,
    get_sec_column,
    get_detector_references,
    list_pore_sizes,
    list_reference_proteins,
    clear_cache,
)

from .sequence import (
    ParsedSequence,
    ProteinAnalysisResult,
    parse_sequence,
    analyze_protein,
)

from .saxs import (
    GuinierFitResult,
    guinier_analysis,
    guinier_fit_line,
    TheoreticalParameterSet,
    calculate_theoretical_i0,
    calculate_theoretical_rg,
    calculate_theoretical_dmax,
    calculate_all_theoretical_params,
    calculate_mw_from_i0,
    calculate_porod_volume,
    estimate_mw_from_porod_volume,
    calculate_wavelength,
    DetectorDistanceRecommendation,
    calculate_detector_distance,
)

from .centrifugation import (
    CentrifugationResult,
    calculate_rcf,
    calculate_rpm,
    calculate_sedimentation,
    calculate_terminal_velocity,
    calculate_centrifugation_distance,
    run_centrifugation,
)

from .hplc import (
    calculate_dilution_factor,
    calculate_concentration_from_uv,
    calculate_retention_time_from_mw,
    calculate_mw_from_retention_time,
    calculate_mass_resolution,
    calculate_molar_ratio,
    HPLCScheduleResult,
    calculate_hplc_saxs_settings,
    calculate_suggested_params,
)

from .session import (
    SaxsMeasurement,
    CalculatorSession,
)

from .export import (
    schedule_to_frames,
    composition_to_frame,
    export_schedule_to_excel,
    export_iucr_table_to_excel,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    'CalculationError',
    'SequenceError',
    'InsufficientDataError',
    'DomainError',
    'MissingParameterError',
    # Types
    'ProteinType',
    'ParticleShape',
    'CalculationOutcome',
    'round_fixed',
    'round_half_up',
    # Configs
    'get_amino_acid_table',
    'get_sec_column',
    'get_detector_references',
    'list_pore_sizes',
    'list_reference_proteins',
    'clear_cache',
    # Sequence
    'ParsedSequence',
    'ProteinAnalysisResult',
    'parse_sequence',
    'analyze_protein',
    # SAXS
    'GuinierFitResult',
    'guinier_analysis',
    'guinier_fit_line',
    'TheoreticalParameterSet',
    'calculate_theoretical_i0',
    'calculate_theoretical_rg',
    'calculate_theoretical_dmax',
    'calculate_all_theoretical_params',
    'calculate_mw_from_i0',
    'calculate_porod_volume',
    'estimate_mw_from_porod_volume',
    'calculate_wavelength',
    'DetectorDistanceRecommendation',
    'calculate_detector_distance',
    # Centrifugation
    'CentrifugationResult',
    'calculate_rcf',
    'calculate_rpm',
    'calculate_sedimentation',
    'calculate_terminal_velocity',
    'calculate_centrifugation_distance',
    'run_centrifugation',
    # HPLC / SEC
    'calculate_dilution_factor',
    'calculate_concentration_from_uv',
    'calculate_retention_time_from_mw',
    'calculate_mw_from_retention_time',
    'calculate_mass_resolution',
    'calculate_molar_ratio',
    'HPLCScheduleResult',
    'calculate_hplc_saxs_settings',
    'calculate_suggested_params',
    # Session
    'SaxsMeasurement',
    'CalculatorSession',
    # Export
    'schedule_to_frames',
    'composition_to_frame',
    'export_schedule_to_excel',
    'export_iucr_table_to_excel',
]
