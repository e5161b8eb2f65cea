"""
SAL code calculation.

Modules
-------
errors      BirthDateError hierarchy (MissingBirthDate, InvalidDateFormat,
            InvalidCalendarDate).
digits      Digit-sum reduction, with master-number handling for the mission.
birth_date  Parse YYYY-MM-DD / DD.MM.YYYY into a BirthDate (strict or lenient).
codes       compute_codes(): birth date string -> SALCodes.
"""
