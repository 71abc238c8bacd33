from rotor_balance.domain.masses import Mass
from rotor_balance.engine.balance import evaluate_balance
from rotor_balance.engine.sweep import sweep_revolution
from rotor_balance.services.results_text import result_lines

# Par opuesto en distintos planos: balanceado estáticamente, no dinámicamente
masses = [
    Mass(mass_kg=1.0, radius_m=0.2, angle_deg=0.0, position_m=0.0),
    Mass(mass_kg=1.0, radius_m=0.2, angle_deg=180.0, position_m=0.5),
]

for phase in (0.0, 45.0, 90.0):
    res = evaluate_balance(masses, phase_deg=phase)
    print(f"--- fase {phase:g}°")
    print("\n".join(result_lines(res)))

sweep = sweep_revolution(masses)
print("|ΣF| máx en la vuelta =", sweep.max_resultant_force())
print("|ΣM| máx en la vuelta =", sweep.max_resultant_moment())
print("(estático, dinámico) en toda la vuelta =", sweep.is_balanced_over_revolution())
